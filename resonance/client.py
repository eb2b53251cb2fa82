# resonance/client.py
"""
Resonance REST API 클라이언트

백엔드 라우트와 1:1로 대응하는 얇은 HTTP 래퍼입니다.
- 세션 토큰은 인스턴스에 보관하고 모든 요청에 Bearer 헤더로 붙입니다.
- 2xx가 아닌 응답은 ResonanceAPIError로 올려 보냅니다.
- check_auth()는 401/403일 때만 로컬 세션을 지우고,
  네트워크 오류나 5xx에서는 캐시된 사용자 정보를 유지합니다.
"""

import logging
from typing import Optional, Dict, Any

import requests

logger = logging.getLogger(__name__)


class ResonanceAPIError(Exception):
    """API가 2xx 이외의 상태 코드로 응답했을 때 발생하는 예외"""

    def __init__(self, status_code: int, error_code: Optional[str] = None, message: Optional[str] = None):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message or f"Request failed with status {status_code}"
        super().__init__(f"[{status_code}] {error_code or 'ERROR'}: {self.message}")

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


class ResonanceClient:

    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.timeout = timeout
        self.user: Optional[Dict[str, Any]] = None
        self.session = requests.Session()

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop('headers', {})
        if self.token:
            headers['Authorization'] = f"Bearer {self.token}"

        response = self.session.request(
            method, f"{self.base_url}/api{path}", headers=headers, timeout=self.timeout, **kwargs
        )

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise ResonanceAPIError(response.status_code, body.get('error_code'), body.get('message'))

        if not response.content:
            return None
        return response.json()

    # --- 인증 ---

    def google_login(self, credential: str) -> Dict[str, Any]:
        """Google credential을 세션 토큰으로 교환하고 토큰/사용자를 보관합니다."""
        data = self._request('POST', '/auth/google', json={'credential': credential})
        self.token = data['token']
        self.user = data['user']
        return data

    def verify(self) -> Dict[str, Any]:
        return self._request('GET', '/auth/verify')['user']

    def get_current_user(self) -> Dict[str, Any]:
        return self._request('GET', '/auth/me')

    def check_auth(self) -> Optional[Dict[str, Any]]:
        """
        저장된 토큰이 아직 유효한지 확인하고 사용자 정보를 갱신합니다.

        :return: 현재 사용자 (토큰이 거부되면 None)
        """
        if not self.token:
            return None
        try:
            self.user = self.get_current_user()
        except ResonanceAPIError as e:
            if e.is_auth_error:
                self.logout()
                return None
            logger.warning(f"인증 확인 실패, 기존 세션 유지: {e}")
        except requests.RequestException as e:
            logger.warning(f"인증 서버에 연결할 수 없어 기존 세션 유지: {e}")
        return self.user

    def logout(self) -> None:
        """로컬 세션만 지웁니다. (서버 측 토큰 폐기는 없음)"""
        self.token = None
        self.user = None

    # --- 감정 게시물 ---

    def create_emotion(self, color: str, pattern: str, motion_intensity: float) -> Dict[str, Any]:
        payload = {'color': color, 'pattern': pattern, 'motionIntensity': motion_intensity}
        return self._request('POST', '/emotions', json=payload)

    def get_feed(self, page: int = 1, limit: int = 20):
        return self._request('GET', '/emotions/feed', params={'page': page, 'limit': limit})

    def get_history(self):
        return self._request('GET', '/emotions/history')

    def get_emotion(self, emotion_id: str) -> Dict[str, Any]:
        return self._request('GET', f'/emotions/{emotion_id}')

    def delete_emotion(self, emotion_id: str) -> Dict[str, Any]:
        return self._request('DELETE', f'/emotions/{emotion_id}')

    # --- 감정 시그널 ---

    def create_signal(self, color: str, motion: str, intensity: float, silence_duration: float) -> Dict[str, Any]:
        payload = {'color': color, 'motion': motion, 'intensity': intensity, 'silenceDuration': silence_duration}
        return self._request('POST', '/signals', json=payload)

    def list_signals(self):
        return self._request('GET', '/signals')

    def get_signal_feed(self, page: int = 1, limit: int = 50):
        return self._request('GET', '/signals/feed', params={'page': page, 'limit': limit})

    def delete_signal(self, signal_id: str) -> Dict[str, Any]:
        return self._request('DELETE', f'/signals/{signal_id}')

    # --- 프로필 ---

    def get_profile(self) -> Dict[str, Any]:
        return self._request('GET', '/users/profile')

    def update_profile(self, name: Optional[str] = None, avatar: Optional[str] = None) -> Dict[str, Any]:
        payload = {}
        if name is not None:
            payload['name'] = name
        if avatar is not None:
            payload['avatar'] = avatar
        return self._request('PUT', '/users/profile', json=payload)

    def delete_account(self) -> Dict[str, Any]:
        data = self._request('DELETE', '/users/account')
        self.logout()
        return data
