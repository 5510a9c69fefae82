from SRI_Generate.cli.sri import main


if __name__ == "__main__":
    main(prog_name="sri-generate")
