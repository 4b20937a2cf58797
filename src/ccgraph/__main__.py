from ccgraph import main

main()
