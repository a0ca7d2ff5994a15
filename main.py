from bundlecmd.cli_run import main

if __name__ == "__main__":
    raise SystemExit(main())
