"""밈 렌더링 예외 모듈."""


class MemeError(Exception):
    """밈 렌더링 관련 예외의 기본 클래스."""


class InvalidArgumentError(MemeError, ValueError):
    """필수 인자가 None이거나 알 수 없는 값일 때."""

    def __init__(self, param: str, message: str | None = None):
        self.param = param
        super().__init__(message or f"{param} cannot be None.")


class AssetLoadError(MemeError, OSError):
    """원본 이미지를 읽거나 디코딩하지 못했을 때."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        detail = f" ({reason})" if reason else ""
        super().__init__(f"이미지 로드 실패: {self.path}{detail}")


class AssetMissingError(MemeError, LookupError):
    """합성에 필요한 캐시 에셋이 없을 때."""


class InvalidGeometryError(MemeError, ValueError):
    """배율·박스 계산이 퇴화했을 때 (0 이하 크기 등)."""
