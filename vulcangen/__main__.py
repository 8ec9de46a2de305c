from vulcangen.cli import main

main()
