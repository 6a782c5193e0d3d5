from living_cost.config import SETTINGS


def build_csv(rows: list[tuple[str, object, object, object]]) -> str:
    """Rows are (province, total, food, non_food)."""
    header = ",".join(
        [SETTINGS.region_column, SETTINGS.food_column, SETTINGS.non_food_column, SETTINGS.total_column]
    )
    lines = [header]
    for name, total, food, non_food in rows:
        lines.append(",".join(f'"{value}"' if isinstance(value, str) else str(value) for value in (name, food, non_food, total)))
    return "\n".join(lines) + "\n"
