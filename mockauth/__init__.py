"""
Mockauth - Mock Authentication API

A stateless mock authentication service that issues signed session tokens
for a fixed pool of fake identities.

Architecture:
- Each module is self-contained with clear interfaces
- Services are built once at start-up and injected into handlers
- No server-side session state

Modules:
- auth: Token issuance/verification and the identity pool
- profile: Templated profile bodies
- api: Response models and the documentation page
"""

__version__ = "1.0.0"
