from enumgen.cli import main

main()
