from cckgen.cli import main

main()
