from src.walk_bingo.app.entrypoint import main

main()
