"""Pipeline services — one module per generation stage."""
