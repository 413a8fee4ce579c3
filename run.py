#!/usr/bin/env python3
"""
Run script for the contact & admin backend
"""
from contact_api.main import run

if __name__ == "__main__":
    run()
