from typing import Dict, List

from .properties import get_text, get_number, get_checkbox, get_date, first_value

# Column order has to match the constants of the front-end
ORDER_HEADERS = [
    "信箱",
    "會員編號",
    "LINE名稱",
    "客人名稱",
    "商品名稱",
    "款式",
    "數量",
    "狀態",
    "金額",
    "商品網址",
    "備註",
    "更新日期",
    "出貨日期",
    "重量",
    "國際運費",
    "含國際運費"
]

SUMMARY_FIELDS = [
    "id",
    "last_edited_time",
    "商品名稱",
    "款式",
    "數量",
    "狀態",
    "金額"
]

# Older rows of the database still carry the product name under "商品"
PRODUCT_NAME_ALIASES = ("商品名稱", "商品")


def _properties(page: Dict) -> Dict:
    props = page.get("properties")
    return props if isinstance(props, dict) else {}


def map_order(page: Dict) -> Dict:
    """Flatten one database row into the CSV record read by the front-end."""
    props = _properties(page)
    return {
        # Customer / contact
        "信箱": get_text(props.get("信箱")),
        "會員編號": get_text(props.get("會員編號")),
        "LINE名稱": get_text(props.get("LINE名稱")),
        "客人名稱": get_text(props.get("客人名稱")),
        # Product
        "商品名稱": first_value(get_text, props, *PRODUCT_NAME_ALIASES),
        "款式": get_text(props.get("款式")),
        "數量": get_number(props.get("數量")),
        "狀態": get_text(props.get("狀態")),
        "金額": get_number(props.get("金額")),
        "商品網址": get_text(props.get("商品網址")),
        "備註": get_text(props.get("備註")),
        # Dates
        "更新日期": (
            get_date(props.get("更新日期")) or page.get("last_edited_time") or ""
        ),
        "出貨日期": get_date(props.get("出貨日期")),
        # Back office
        "重量": get_number(props.get("重量")),
        "國際運費": get_number(props.get("國際運費")),
        "含國際運費": get_checkbox(props.get("含國際運費"))
    }


def map_summary(page: Dict) -> Dict:
    props = _properties(page)
    return {
        "id": page.get("id", ""),
        "last_edited_time": page.get("last_edited_time", ""),
        "商品名稱": first_value(get_text, props, *PRODUCT_NAME_ALIASES),
        "款式": get_text(props.get("款式")),
        "數量": get_number(props.get("數量")),
        "狀態": get_text(props.get("狀態")),
        "金額": get_number(props.get("金額"))
    }


def map_pages(pages: List[Dict], mapper) -> List[Dict]:
    return [mapper(page) for page in pages]
