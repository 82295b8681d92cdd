from gitkit.cli.app import main

main()
