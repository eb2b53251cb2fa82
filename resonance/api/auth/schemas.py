# resonance/api/auth/schemas.py
from marshmallow import Schema, fields, validate


class GoogleLoginSchema(Schema):
    """POST /api/auth/google 요청의 유효성을 검사하는 스키마"""
    credential = fields.Str(
        required=True,
        validate=validate.Length(min=1),
        metadata={"description": "Google Identity Services가 발급한 ID 토큰"}
    )


class SessionUserSchema(Schema):
    """로그인/세션 확인 응답에 포함되는 사용자 정보"""
    id = fields.Str(attribute='user_id', dump_only=True)
    name = fields.Str(dump_only=True)
    email = fields.Email(dump_only=True)
    avatar = fields.Str(allow_none=True, dump_only=True)
    created_at = fields.DateTime(data_key='createdAt', dump_only=True)
