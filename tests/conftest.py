import pytest
from recipe_explorer.core.settings import Settings


def make_record(seq, name, calories="", category="", method="", hash_tag="", **extra):
    """Build a raw COOKRCP01 row the way the API returns it (all strings)."""
    record = {
        "RCP_SEQ": str(seq),
        "RCP_NM": name,
        "INFO_ENG": calories,
        "INFO_CAR": "",
        "INFO_PRO": "",
        "INFO_FAT": "",
        "INFO_NA": "",
        "RCP_PAT2": category,
        "RCP_WAY2": method,
        "HASH_TAG": hash_tag,
        "RCP_PARTS_DTLS": "",
        "ATT_FILE_NO_MAIN": "",
        "ATT_FILE_NO_MK": "",
    }
    for i in range(1, 21):
        record[f"MANUAL{i:02d}"] = ""
        record[f"MANUAL_IMG{i:02d}"] = ""
    record.update(extra)
    return record


@pytest.fixture
def settings():
    """Settings with a fake key and no caching."""
    return Settings(
        api_key="test-key",
        base_url="http://api.example.com/api",
        batch_size=100,
        max_recipes=500,
        cache_ttl_seconds=0
    )


@pytest.fixture
def sample_records():
    return [
        make_record(1, "새우 두부 계란찜", "220", "반찬", "찌기", "#새우 #두부"),
        make_record(2, "부추 콩가루 찜", "480.5", "반찬", "찌기", "부추,콩가루"),
        make_record(3, "방울토마토 소박이", "125", "일품", "기타", ""),
        make_record(4, "Apple salad", "350 kcal", "후식", "기타", "#salad #apple"),
    ]
