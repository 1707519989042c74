from abcq.cli import main

main()
