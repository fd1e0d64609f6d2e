from cli_interpreter.main import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
