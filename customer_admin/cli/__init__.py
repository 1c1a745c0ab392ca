"""Command-line console (typer app ``customer-admin``)."""
