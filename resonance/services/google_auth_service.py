# resonance/services/google_auth_service.py

import logging
from typing import Dict, Any, Optional

from google.auth import exceptions as google_exceptions
from google.oauth2 import id_token as google_id_token
from google.auth.transport.requests import Request as GoogleAuthRequest


class GoogleAuthService:
    """Google Identity Services가 발급한 ID 토큰(credential)을 검증하는 서비스 클래스입니다."""

    @staticmethod
    def verify_credential(credential: str, client_id: str) -> Dict[str, Any]:
        """
        ID 토큰의 서명, 발급자(iss), 만료(exp), 대상(aud)을 Google 공개키로 검증하고
        계정 생성에 필요한 클레임만 추려서 반환합니다.

        :raises ValueError: 토큰이 유효하지 않거나 필수 클레임(sub, email)이 없는 경우
        :raises google.auth.exceptions.TransportError: Google 공개키를 가져오지 못한 경우
        """
        if not credential:
            raise ValueError("credential이 비어 있습니다.")

        try:
            claims = google_id_token.verify_oauth2_token(
                credential,
                GoogleAuthRequest(),
                audience=client_id,
            )
        except google_exceptions.TransportError:
            # 공개키 조회 실패는 credential 문제가 아니므로 그대로 전파 (500)
            raise
        except google_exceptions.GoogleAuthError as e:
            # 잘못된 발급자(iss) 등은 ValueError가 아닌 GoogleAuthError로 올라옴
            raise ValueError(str(e)) from e

        google_id = claims.get('sub')
        email = claims.get('email')
        if not google_id or not email:
            raise ValueError("Google credential에 sub/email 클레임이 없습니다.")
        if claims.get('email_verified') is False:
            raise ValueError("이메일 인증이 완료되지 않은 Google 계정입니다.")

        logging.info(f"Google credential 검증 성공 (email: {email})")
        return {
            'sub': google_id,
            'email': email,
            'name': GoogleAuthService._display_name(claims),
            'picture': claims.get('picture'),
        }

    @staticmethod
    def _display_name(claims: Dict[str, Any]) -> Optional[str]:
        """name 클레임이 없으면 이메일의 로컬 파트를 표시 이름으로 사용합니다."""
        name = claims.get('name')
        if name:
            return name
        return claims['email'].split('@', 1)[0]
