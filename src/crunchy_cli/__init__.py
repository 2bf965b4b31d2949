# ABOUTME: crunchy-cli package root
# ABOUTME: Command line output facade multiplexing log lines and a progress spinner

__version__ = "0.1.0"
