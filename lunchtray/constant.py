"""Editable static menu configuration."""

from __future__ import annotations

# Prices are strings so they load into Decimal without float noise.
MENU_TABLE: dict[str, dict[str, str]] = {
    "cauliflower": {
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "price": "7.00",
        "type": "entree",
    },
    "chili": {
        "name": "Three Bean Chili",
        "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
        "price": "4.00",
        "type": "entree",
    },
    "pasta": {
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, with plum tomatoes cooked in garlic and olive oil",
        "price": "5.50",
        "type": "entree",
    },
    "skillet": {
        "name": "Spicy Black Bean Skillet",
        "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
        "price": "5.50",
        "type": "entree",
    },
    "salad": {
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "price": "2.50",
        "type": "side",
    },
    "soup": {
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "price": "3.00",
        "type": "side",
    },
    "potatoes": {
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice blend",
        "price": "2.00",
        "type": "side",
    },
    "rice": {
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "price": "1.50",
        "type": "side",
    },
    "bread": {
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "price": "0.50",
        "type": "accompaniment",
    },
    "berries": {
        "name": "Mixed Berries",
        "description": "Cherries, blueberries, and strawberries",
        "price": "1.00",
        "type": "accompaniment",
    },
    "pickles": {
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "price": "0.50",
        "type": "accompaniment",
    },
}

ITEM_TYPE_BADGES: dict[str, str] = {
    "entree": "E",
    "side": "S",
    "accompaniment": "A",
}
