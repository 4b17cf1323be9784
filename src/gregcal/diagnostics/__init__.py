"""Developer diagnostics. Each module exposes main(argv) and is run via `gregcal diag ...`."""
