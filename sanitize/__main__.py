from sanitize.main import main

main()
