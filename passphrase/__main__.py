"""
Passphrase Module Entry Point
==============================

Allows running the Passphrase CLI via: python -m passphrase
"""

from passphrase.cli import main

if __name__ == "__main__":
    main()
