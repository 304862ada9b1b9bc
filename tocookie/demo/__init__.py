"""Demo walkthrough for cookie issuance and verification."""
