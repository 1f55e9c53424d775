from papirus_switcher.cli.main import main

main()
