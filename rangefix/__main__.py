from rangefix.cli import main

main()
