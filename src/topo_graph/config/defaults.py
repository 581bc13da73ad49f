"""默认配置常量"""

# CLI 构造前的顶点数上限（笛卡尔积使规模成倍增长）
MAX_VERTICES_DEFAULT = 100_000

# 列表输出时最多显示的条目数
LISTING_DEFAULT_LIMIT = 64
