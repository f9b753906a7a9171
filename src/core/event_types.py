"""이벤트 유형 상수

호스트 → 모듈, 모듈 → 관찰자 방향 이벤트.
"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # host
    BLOCK_DESTROYED = "block_destroyed"  # data: player_id, x, y, z, block_id

    # inventory
    ITEM_PICKED_UP = "item_picked_up"
    ITEM_LOST = "item_lost"
