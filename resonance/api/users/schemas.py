# resonance/api/users/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE


class UserProfileResponseSchema(Schema):
    """
    GET/PUT /api/users/profile
    본인 프로필 응답 스키마. google_id, last_login 같은 내부 정보는 제외합니다.
    """
    id = fields.Str(attribute='user_id', dump_only=True)
    name = fields.Str()
    email = fields.Email()
    avatar = fields.Str(allow_none=True)
    provider = fields.Method('get_provider')
    created_at = fields.DateTime(data_key='createdAt')

    def get_provider(self, user):
        return user.provider.value


class UserProfileUpdateSchema(Schema):
    """
    PUT /api/users/profile
    name/avatar만 받습니다. email, provider 등 다른 필드는 무시됩니다.
    """
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=validate.Length(min=1, max=100))
    avatar = fields.Str(allow_none=True, validate=validate.Length(max=2048))
