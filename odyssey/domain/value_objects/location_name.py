import re


def split_location_name(name: str) -> tuple[str, str]:
    """'도시, 지역, 국가' 형태의 위치 이름을 (city, country)로 분리한다.

    첫 토큰이 도시, 마지막 토큰이 국가. 토큰이 하나뿐이면 둘 다 같은 값.
    """
    parts = [part.strip() for part in name.split(",")]
    return parts[0], parts[-1]


def place_slug(name: str) -> str:
    """추천 장소 ID: 소문자 + 공백 묶음을 '-'로."""
    return re.sub(r"\s+", "-", name.lower())
