"""
Response formatting for dishes, package items, packages and add-ons.
Decimal amounts go out as JSON numbers.
"""
from .pricing import price_per_person, quantize, to_decimal


def _money(value):
    if value is None:
        return None
    return float(quantize(to_decimal(value)))


def _enum_value(value):
    return value.value if hasattr(value, "value") else value


def format_category(category):
    if category is None:
        return None
    return {
        "id": category.id,
        "name": category.name,
        "description": category.description,
    }


def format_dish(dish):
    return {
        "id": dish.id,
        "name": dish.name,
        "image_url": dish.image_url,
        "caterer_id": dish.caterer_id,
        "price": _money(dish.price),
        "currency": dish.currency,
        "quantity_in_gm": dish.quantity_in_gm,
        "pieces": dish.pieces,
        "is_active": dish.is_active,
        "cuisine_type": dish.cuisine_type.name if dish.cuisine_type else None,
        "category": format_category(dish.category),
        "sub_category": dish.sub_category.name if dish.sub_category else None,
        "created_at": dish.created_at,
        "updated_at": dish.updated_at,
    }


def format_package_summary(package):
    if package is None:
        return None
    return {
        "id": package.id,
        "name": package.name,
        "minimum_people": package.minimum_people,
        "total_price": _money(package.total_price),
        "currency": package.currency,
        "customisation_type": _enum_value(package.customisation_type),
        "is_active": package.is_active,
    }


def format_package_item(item, package=None, include_package=False):
    data = {
        "id": item.id,
        "dish_id": item.dish_id,
        "caterer_id": item.caterer_id,
        "package_id": item.package_id,
        "is_draft": item.attachment.is_draft,
        "people_count": item.people_count,
        "quantity": item.quantity,
        "is_optional": item.is_optional,
        "is_addon": item.is_addon,
        "price_at_time": _money(item.price_at_time),
        "dish": format_dish(item.dish) if item.dish else None,
        "created_at": item.created_at,
        "updated_at": item.updated_at,
    }
    if include_package:
        data["package"] = format_package_summary(package)
    return data


def format_add_on(add_on):
    return {
        "id": add_on.id,
        "package_id": add_on.package_id,
        "name": add_on.name,
        "description": add_on.description,
        "price": add_on.price,
        "currency": add_on.currency,
        "is_active": add_on.is_active,
        "created_at": add_on.created_at,
        "updated_at": add_on.updated_at,
    }


def format_package(package, total_price=None, active_add_ons_only=False):
    """Fully hydrated package view. total_price overrides the stored value."""
    total = package.total_price if total_price is None else total_price
    add_ons = package.add_ons
    if active_add_ons_only:
        add_ons = [add_on for add_on in add_ons if add_on.is_active]

    return {
        "id": package.id,
        "name": package.name,
        "caterer_id": package.caterer_id,
        "user_id": package.user_id,
        "created_by": _enum_value(package.created_by),
        "cover_image_url": package.cover_image_url,
        "minimum_people": package.minimum_people,
        "total_price": _money(total),
        "price_per_person": float(price_per_person(total, package.minimum_people)),
        "is_custom_price": package.is_custom_price,
        "currency": package.currency,
        "customisation_type": _enum_value(package.customisation_type),
        "is_active": package.is_active,
        "is_available": package.is_available,
        "rating": package.rating,
        "revision": package.revision,
        "items": [format_package_item(item) for item in package.items],
        "category_selections": [
            {
                "id": selection.id,
                "category": format_category(selection.category),
                "num_dishes_to_select": selection.num_dishes_to_select,
            }
            for selection in package.category_selections
        ],
        "occasions": [
            {
                "id": occasion.id,
                "name": occasion.name,
                "description": occasion.description,
            }
            for occasion in package.occasions
        ],
        "add_ons": [format_add_on(add_on) for add_on in add_ons],
        "created_at": package.created_at,
        "updated_at": package.updated_at,
    }
