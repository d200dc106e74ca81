"""Service layer. Every public operation returns a ServiceResult."""
