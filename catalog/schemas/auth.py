from pydantic import BaseModel, EmailStr, field_validator

from catalog.models.user import SELF_REGISTRABLE_ROLES, Role

MIN_PASSWORD_LENGTH = 6
MISSING_FIELDS_MESSAGE = 'Please fill all fields.'


def _require_text(value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(MISSING_FIELDS_MESSAGE)
    return value


class RegistrationRequest(BaseModel):
    name: str
    email: EmailStr
    password: str
    role: Role

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, value) -> str:
        return _require_text(value).strip()

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, value) -> str:
        return _require_text(value).strip().lower()

    @field_validator('password', mode='before')
    @classmethod
    def validate_password(cls, value) -> str:
        value = _require_text(value)
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(f'Password must be {MIN_PASSWORD_LENGTH} or more characters.')
        return value

    @field_validator('role', mode='before')
    @classmethod
    def validate_role(cls, value) -> Role:
        if isinstance(value, Role):
            role = value
        else:
            try:
                role = Role(_require_text(value).strip().lower())
            except ValueError as exc:
                if str(exc) == MISSING_FIELDS_MESSAGE:
                    raise
                raise ValueError('A valid role must be selected.') from exc
        if role not in SELF_REGISTRABLE_ROLES:
            raise ValueError('A valid role must be selected.')
        return role

