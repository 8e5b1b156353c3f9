"""Documents domain layer: certificates and invoices."""
