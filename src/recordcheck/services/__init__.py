"""Service layer: business operations returning ServiceResult."""
