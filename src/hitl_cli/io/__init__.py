"""File I/O for toolkit definitions and the installation registry."""
