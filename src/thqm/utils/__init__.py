"""Helper utilities: network addresses, QR codes, paths and logging."""
