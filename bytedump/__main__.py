""" Main entry point """

from .cli.hexdump import hexdump


if __name__ == "__main__":
    hexdump()
