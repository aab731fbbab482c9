"""Authentication request and response schemas."""
from marshmallow import EXCLUDE, Schema, fields, post_load, validate


class RegisterRequestSchema(Schema):
    """POST /auth/register body."""

    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(required=True, validate=validate.Length(min=8, max=128))

    @post_load
    def normalize_email(self, data, **kwargs):
        data["email"] = data["email"].strip().lower()
        return data


class LoginRequestSchema(Schema):
    """POST /auth/login body."""

    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(required=True)


class UserSchema(Schema):
    """Public view of a user."""

    id = fields.String()
    email = fields.String()
    subscription_tier = fields.Function(
        lambda user: user.subscription_tier.value if user.subscription_tier else "free"
    )
    created_at = fields.DateTime(allow_none=True)


class AuthResponseSchema(Schema):
    """Token plus user for successful register/login."""

    token = fields.String()
    user = fields.Nested(UserSchema)
