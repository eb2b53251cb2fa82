# resonance/api/signals/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from resonance.models.signal import SignalMotion, SIGNAL_INTENSITY_RANGE


class SignalOwnerSchema(Schema):
    """시그널 피드의 작성자 정보 (아바타만 공개)"""
    id = fields.Str(required=True)
    avatar = fields.Str(allow_none=True)


class SignalCreateSchema(Schema):
    """POST /api/signals 요청 본문의 유효성을 검사합니다. 정의되지 않은 키는 무시합니다."""
    class Meta:
        unknown = EXCLUDE

    color = fields.Str(required=True, validate=validate.Length(min=1, max=64))
    motion = fields.Str(required=True, validate=validate.OneOf([m.value for m in SignalMotion]))
    # 0~100 퍼센트 값 (Emotion.motionIntensity의 0~1과 다름)
    intensity = fields.Float(
        required=True,
        validate=validate.Range(min=SIGNAL_INTENSITY_RANGE[0], max=SIGNAL_INTENSITY_RANGE[1]),
    )
    silence_duration = fields.Float(
        required=True,
        data_key='silenceDuration',
        validate=validate.Range(min=0),
    )


class SignalResponseSchema(Schema):
    """시그널 응답 형식"""
    id = fields.Str(attribute='signal_id', dump_only=True)
    user_id = fields.Str(data_key='userId')
    color = fields.Str()
    motion = fields.Str()
    intensity = fields.Float()
    silence_duration = fields.Float(data_key='silenceDuration')
    timestamp = fields.DateTime()


class SignalFeedItemSchema(SignalResponseSchema):
    """피드용 시그널 응답 (작성자 아바타 포함)"""
    user = fields.Nested(SignalOwnerSchema, allow_none=True)
