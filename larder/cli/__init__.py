"""Command-line interface for larder.

Usage:
    larder normalize "ΜΠΑΝΑΝΕΣ" --store ALPHAMEGA
    larder normalize --json < names.txt
    larder receipt extracted_receipt.json
    larder receipt - --rules my_rules.toml
"""
