from __future__ import annotations

import os
from typing import Any, List

import requests

from dualsubs.subtitles import Cue

from .codec import decode_cues, encode_cues
from .translator import TranslationEngine, TranslationError


class GoogleTranslator(TranslationEngine):
    """
    基于 Google Cloud Translation API (v2) 的翻译引擎。

    默认使用官方接口：
      - https://translation.googleapis.com/language/translate/v2
    也可通过环境变量自定义：
      - DUALSUBS_TRANSLATE_URL
        - 例如指向自建代理或兼容服务

    代理配置（可选，通过 .env 或环境变量注入）：
      - DUALSUBS_HTTP_PROXY
      - DUALSUBS_HTTPS_PROXY

    每批字幕只发起一次请求：每条字幕编码为一段带 <span> 标记的 HTML，
    返回结果按位置与原字幕一一对应。访问令牌以 Bearer 方式附加在每个请求上。
    """

    def __init__(
        self,
        access_token: str,
        base_url: str | None = None,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        if not access_token:
            raise ValueError("GoogleTranslator requires an access token.")
        self.access_token = access_token
        env_url = os.getenv("DUALSUBS_TRANSLATE_URL")
        if base_url is not None:
            self.base_url = base_url.rstrip("/")
        elif env_url:
            self.base_url = env_url.rstrip("/")
        else:
            self.base_url = "https://translation.googleapis.com"
        self.timeout = timeout
        self.session = session or requests.Session()

        http_proxy = os.getenv("DUALSUBS_HTTP_PROXY")
        https_proxy = os.getenv("DUALSUBS_HTTPS_PROXY")
        proxies: dict[str, str] = {}
        if http_proxy:
            proxies["http"] = http_proxy
        if https_proxy:
            proxies["https"] = https_proxy
        self.proxies = proxies or None

    def _endpoint(self) -> str:
        return f"{self.base_url}/language/translate/v2"

    def _request(self, texts: List[str], source_lang: str, target_lang: str) -> List[str]:
        payload = {
            "q": texts,
            "format": "html",
            "source": source_lang,
            "target": target_lang,
        }
        headers = {
            "Authorization": f"Bearer {self.access_token}",
        }
        try:
            resp = self.session.post(
                self._endpoint(),
                json=payload,
                headers=headers,
                timeout=self.timeout,
                proxies=self.proxies,
            )
        except requests.RequestException as exc:
            raise TranslationError(f"翻译请求失败: {exc}") from exc

        if not resp.ok:
            raise TranslationError(
                f"翻译服务返回错误状态 {resp.status_code}: {resp.text}"
            )

        try:
            data: Any = resp.json()
        except ValueError as exc:
            raise TranslationError(f"翻译服务返回的不是合法 JSON: {exc}") from exc

        try:
            translations = data["data"]["translations"]
            return [str(item["translatedText"]) for item in translations]
        except (KeyError, TypeError) as exc:
            raise TranslationError(f"翻译服务响应格式异常: {data!r}") from exc

    def translate_cues(
        self,
        cues: List[Cue],
        source_lang: str,
        target_lang: str,
    ) -> List[Cue]:
        if not cues:
            return []
        texts = encode_cues(cues)
        translated = self._request(texts, source_lang, target_lang)
        return decode_cues(cues, translated)

    def close(self) -> None:
        self.session.close()
