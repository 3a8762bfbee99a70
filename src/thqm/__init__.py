"""thqm -- pick an entry from your phone, get it back on stdout.

Reads a list of entries from standard input, serves them as a styled web
page on the local network, and prints whichever entry the user taps to
standard output. A QR code of the page URL makes it easy to open on a
mobile device.
"""

__version__ = "0.1.0"
