from csvpretty.cli import main

main()
