from random_verse.cli import main

main()
