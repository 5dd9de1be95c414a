"""HTTP API for the Contract Validation System."""
