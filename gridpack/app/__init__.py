"""Shell, command parsing and benchmark harness built on the grid core."""
