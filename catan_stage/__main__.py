from catan_stage.cli import main

main()
