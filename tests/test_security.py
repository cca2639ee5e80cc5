import pytest
from jose import jwt

from myflix.domain.exceptions import AuthenticationError
from myflix.domain.models.user import User
from myflix.infrastructure.security.password_hasher import PasswordHasher
from myflix.infrastructure.security.token_service import TokenService
from myflix.utils.ids import new_id


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def user():
    return User(id=new_id(), username="cinephile01", password="hash", email="a@example.com")


class TestPasswordHasher:

    def test_hash_differs_from_plaintext(self, hasher):
        hashed = hasher.hash("s3cret-pass")

        assert hashed != "s3cret-pass"
        assert hashed.startswith("$2")

    def test_same_password_hashes_differently(self, hasher):
        assert hasher.hash("s3cret-pass") != hasher.hash("s3cret-pass")

    def test_verify_accepts_correct_password(self, hasher):
        assert hasher.verify("s3cret-pass", hasher.hash("s3cret-pass"))

    def test_verify_rejects_wrong_password(self, hasher):
        assert not hasher.verify("wrong", hasher.hash("s3cret-pass"))

    def test_verify_rejects_empty_and_malformed_input(self, hasher):
        assert not hasher.verify("", hasher.hash("s3cret-pass"))
        assert not hasher.verify("s3cret-pass", "")
        assert not hasher.verify("s3cret-pass", "not-a-bcrypt-hash")

    def test_passwords_longer_than_72_bytes_are_accepted(self, hasher):
        long_password = "x" * 100

        assert hasher.verify(long_password, hasher.hash(long_password))


class TestTokenService:

    def test_token_carries_user_claims(self, user):
        service = TokenService(secret="secret")

        claims = service.decode(service.create_access_token(user))

        assert claims["sub"] == user.id
        assert claims["username"] == "cinephile01"
        assert claims["exp"] > claims["iat"]

    def test_token_signed_with_other_secret_is_rejected(self, user):
        token = TokenService(secret="other").create_access_token(user)

        with pytest.raises(AuthenticationError):
            TokenService(secret="secret").decode(token)

    def test_expired_token_is_rejected(self, user):
        service = TokenService(secret="secret", expire_minutes=-1)

        with pytest.raises(AuthenticationError):
            service.decode(service.create_access_token(user))

    def test_garbage_token_is_rejected(self):
        with pytest.raises(AuthenticationError):
            TokenService(secret="secret").decode("not.a.token")

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode({"username": "cinephile01"}, "secret", algorithm="HS256")

        with pytest.raises(AuthenticationError):
            TokenService(secret="secret").decode(token)
