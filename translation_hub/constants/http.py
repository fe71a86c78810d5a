"""HTTP constants shared by handlers and middleware."""

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
}

REQUEST_ID_HEADER = "X-Request-ID"
