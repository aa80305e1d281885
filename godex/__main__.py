from godex.app import main

main()
