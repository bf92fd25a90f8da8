from natplat.cli.app import main

main()
