from .google import CredentialLoader, generate_secure_password

__all__ = ["CredentialLoader", "generate_secure_password"]
