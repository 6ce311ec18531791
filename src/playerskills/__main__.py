from playerskills.main import main

main()
