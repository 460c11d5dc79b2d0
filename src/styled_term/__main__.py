from styled_term.cli.main import main

main()
