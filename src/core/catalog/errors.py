"""카탈로그 Core 예외"""


class CatalogError(Exception):
    """카탈로그 처리 중 발생하는 예외의 기반 클래스"""


class CatalogLoadError(CatalogError):
    """카탈로그 파일을 읽거나 해석할 수 없음"""


class IdConversionError(CatalogError):
    """식별자 문자열을 화이트리스트 원소 타입으로 변환 실패"""

    def __init__(self, item_id: str, target: type) -> None:
        super().__init__(f"Cannot convert {item_id!r} to {target.__name__}")
        self.item_id = item_id
        self.target = target
