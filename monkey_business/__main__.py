from monkey_business.run_simulation import main

if __name__ == "__main__":
    main()
