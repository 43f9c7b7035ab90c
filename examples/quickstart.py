"""Credhash Quickstart — hash on signup, verify on login."""

from credhash import CredentialHasher, HasherConfig

# 1. Create a hasher (PBKDF2-HMAC-SHA1, 10000 rounds, 16-char salt, 30-byte key)
hasher = CredentialHasher()

# 2. Hash a new password; store the returned text on the user record
stored = hasher.hash("correct horse")
print(f"stored: {stored}")

# 3. Verify login attempts against the stored text
print("correct horse  ->", hasher.verify("correct horse", stored))
print("incorrect horse ->", hasher.verify("incorrect horse", stored))

# 4. Raise the cost later; old credentials still verify
stronger = CredentialHasher(HasherConfig(iterations=20000, algorithm="pbkdf2-sha256"))
print("old credential still valid:", stronger.verify("correct horse", stored))
if stronger.needs_rehash(stored):
    stored = stronger.hash("correct horse")
    print(f"upgraded: {stored}")
