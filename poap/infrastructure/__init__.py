"""Infrastructure layer - adapters implementing domain protocols.

- storage/: key-value store backends and key layout
- persistence/: repositories mapping entities onto the store
- addresses/: account address validators
- logging/: structured logging adapter
"""
