import argparse
import json
import os
from recipe_explorer.services.recipe_service import RecipeService
from recipe_explorer.utils.field_parser import adapt_recipe


def export_recipes(service: RecipeService, output_path: str, max_recipes: int) -> int:
    records = service.load_recipes(1, max_recipes, max_recipes)
    recipes = [adapt_recipe(r).model_dump(exclude={"original_data"}) for r in records]

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump(recipes, handle, ensure_ascii=False, indent=2)
    return len(recipes)


def main():
    parser = argparse.ArgumentParser(description="Export parsed recipes to a JSON snapshot.")
    parser.add_argument("--output", default="data/recipes.json")
    parser.add_argument("--max-recipes", type=int, default=500)
    args = parser.parse_args()

    service = RecipeService()
    if not service.settings.api_key:
        raise RuntimeError("MFDS_API_KEY is required to export recipes.")

    count = export_recipes(service, args.output, args.max_recipes)
    print(f"Exported {count} recipes to {args.output}.")


if __name__ == "__main__":
    main()
