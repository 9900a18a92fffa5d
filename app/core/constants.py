"""Core constants: endpoint labels and shared literal values."""

# Endpoint label attached to listing log lines
DOCUMENT_TYPES_ENDPOINT = "GET /document-types"

# Claim carrying space/comma/semicolon separated permission codes
PERMISSIONS_CLAIM = "permissions"
