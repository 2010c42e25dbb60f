"""로그인 유스케이스"""
from dataclasses import dataclass
from domain.exceptions import InvalidCredentialsError
from application.ports.account_repository import AccountRepository


@dataclass
class LoginInput:
    email: str
    password: str


@dataclass
class LoginOutput:
    user_id: int
    email: str
    role: str


class LoginUseCase:
    def __init__(self, account_repo: AccountRepository, verify_password_fn):
        self._account_repo = account_repo
        self._verify_password = verify_password_fn

    async def execute(self, input: LoginInput) -> LoginOutput:
        account = await self._account_repo.get_by_email(input.email)
        if account is None:
            raise InvalidCredentialsError()
        if not self._verify_password(input.password, account.password_hash):
            raise InvalidCredentialsError()
        if not account.is_active:
            raise InvalidCredentialsError()
        await self._account_repo.update_last_login(account.id)
        return LoginOutput(user_id=account.id, email=account.email, role=account.role)
