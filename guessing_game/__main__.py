from guessing_game.main import main_cli

main_cli()
