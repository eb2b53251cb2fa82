# resonance/api/emotions/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from resonance.models.emotion import EmotionPattern, MOTION_INTENSITY_RANGE


# --- 재사용을 위한 중첩 스키마 ---
class OwnerSchema(Schema):
    """게시물 응답에 포함될 작성자 공개 정보 스키마."""
    id = fields.Str(required=True)
    name = fields.Str(allow_none=True)
    avatar = fields.Str(allow_none=True)


# --- API 요청/응답 스키마 ---

class EmotionCreateSchema(Schema):
    """POST /api/emotions 요청 본문의 유효성을 검사합니다. 정의되지 않은 키는 무시합니다."""
    class Meta:
        unknown = EXCLUDE

    color = fields.Str(required=True, validate=validate.Length(min=1, max=64))
    pattern = fields.Str(required=True, validate=validate.OneOf([p.value for p in EmotionPattern]))
    motion_intensity = fields.Float(
        required=True,
        data_key='motionIntensity',
        validate=validate.Range(min=MOTION_INTENSITY_RANGE[0], max=MOTION_INTENSITY_RANGE[1]),
    )


class EmotionResponseSchema(Schema):
    """감정 게시물 응답을 위한 최종 JSON 형식을 정의합니다."""
    id = fields.Str(attribute='emotion_id', dump_only=True)
    user_id = fields.Str(data_key='userId')
    color = fields.Str()
    pattern = fields.Str()
    motion_intensity = fields.Float(data_key='motionIntensity')
    created_at = fields.DateTime(data_key='createdAt')
    user = fields.Nested(OwnerSchema, allow_none=True)
