MEALS_DATA = [
    {"name": "Spicy Thai Curry", "cuisine": "Thai", "description": "Red curry with chicken and coconut milk.", "primary_ingredients": ["chicken", "coconut milk", "curry paste"], "allergens": [], "weather": ["cold"], "time_of_day": ["dinner"], "spiciness": 4, "heaviness": 3, "flavor_tags": ["spicy", "thai", "creamy"]},
    {"name": "Mild Caesar Salad", "cuisine": "American", "description": "Romaine, grilled chicken and parmesan.", "primary_ingredients": ["lettuce", "chicken", "parmesan"], "allergens": ["dairy"], "weather": ["hot"], "time_of_day": ["lunch"], "spiciness": 0, "heaviness": 1, "flavor_tags": ["fresh", "light", "savory"]},
    {"name": "Rainy Day Soup", "cuisine": "French", "description": "Slow-simmered vegetable broth.", "primary_ingredients": ["vegetables", "broth"], "allergens": [], "weather": ["rain", "cold"], "time_of_day": ["lunch", "dinner"], "spiciness": 1, "heaviness": 2, "flavor_tags": ["warming", "healthy", "comfort"]},
    {"name": "Nut-Crusted Fish", "cuisine": "Mediterranean", "description": "White fish baked under a crushed nut crust.", "primary_ingredients": ["fish", "nuts"], "allergens": ["nuts", "fish"], "weather": ["normal"], "time_of_day": ["dinner"], "spiciness": 2, "heaviness": 2, "flavor_tags": ["crunchy", "protein", "fancy"]},
    {"name": "Margherita Pasta", "cuisine": "Italian", "description": "Pasta with tomato and basil.", "primary_ingredients": ["pasta", "tomato", "basil"], "allergens": ["gluten"], "weather": ["normal"], "time_of_day": ["dinner"], "spiciness": 0, "heaviness": 3, "flavor_tags": ["savory", "herby"]},
    {"name": "Chana Masala", "cuisine": "Indian", "description": "Chickpeas in a spiced tomato gravy.", "primary_ingredients": ["chickpeas", "tomato", "onion"], "allergens": [], "weather": ["cold", "rain"], "time_of_day": ["lunch", "dinner"], "spiciness": 3, "heaviness": 3, "flavor_tags": ["spicy", "aromatic", "hearty"]},
    {"name": "Cold Soba Noodles", "cuisine": "Japanese", "description": "Chilled buckwheat noodles with dipping sauce.", "primary_ingredients": ["buckwheat noodles", "soy sauce", "scallion"], "allergens": ["soy", "gluten"], "weather": ["hot"], "time_of_day": ["lunch"], "spiciness": 0, "heaviness": 1, "flavor_tags": ["light", "umami", "fresh"]},
    {"name": "Beef Pho", "cuisine": "Vietnamese", "description": "Rice noodle soup with thin-sliced beef.", "primary_ingredients": ["beef", "rice noodles", "broth"], "allergens": [], "weather": ["rain", "cold"], "time_of_day": ["breakfast", "lunch", "dinner"], "spiciness": 1, "heaviness": 2, "flavor_tags": ["warming", "aromatic", "comfort"]},
    {"name": "Shakshuka", "cuisine": "Middle Eastern", "description": "Eggs poached in peppers and tomato.", "primary_ingredients": ["eggs", "tomato", "bell pepper"], "allergens": ["eggs"], "weather": ["normal", "cold"], "time_of_day": ["breakfast", "lunch"], "spiciness": 2, "heaviness": 2, "flavor_tags": ["savory", "smoky"]},
    {"name": "Greek Yogurt Bowl", "cuisine": "Greek", "description": "Yogurt with honey, walnuts and berries.", "primary_ingredients": ["greek yogurt", "honey", "berries"], "allergens": ["dairy", "nuts"], "weather": ["hot", "normal"], "time_of_day": ["breakfast"], "spiciness": 0, "heaviness": 1, "flavor_tags": ["sweet", "fresh", "light"]},
    {"name": "Fish Tacos", "cuisine": "Mexican", "description": "Grilled fish, slaw and chipotle crema.", "primary_ingredients": ["fish", "tortilla", "cabbage"], "allergens": ["fish", "dairy"], "weather": ["hot", "normal"], "time_of_day": ["lunch", "dinner"], "spiciness": 2, "heaviness": 2, "flavor_tags": ["zesty", "fresh", "smoky"]},
    {"name": "Mapo Tofu", "cuisine": "Chinese", "description": "Silken tofu in a numbing chili bean sauce.", "primary_ingredients": ["tofu", "pork", "chili bean paste"], "allergens": ["soy"], "weather": ["cold", "rain"], "time_of_day": ["dinner"], "spiciness": 5, "heaviness": 3, "flavor_tags": ["spicy", "numbing", "umami"]},
]
