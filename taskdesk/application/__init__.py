"""Application layer: interfaces, access policy, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, notification dispatch).
"""
