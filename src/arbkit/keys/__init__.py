"""
Keys - Signing credential providers.

A provider turns some key source (environment, dotenv file, memory) into an
eth-account LocalAccount that can sign transactions and report its address.
"""
