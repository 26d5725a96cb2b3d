from balance_blade.app import main

main()
