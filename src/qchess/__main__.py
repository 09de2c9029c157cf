from qchess.app import main

main()
