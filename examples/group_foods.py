"""Group food items by nutritional profile.

This example shows how to:
1. Build points from a nutrient table
2. Normalize features so no nutrient dominates
3. Cluster the foods into groups
4. Inspect group centroids and quality metrics
"""

import logging

import pandas as pd

from nutricluster import (
    NutriclusterSettings,
    compute_group_metrics,
    normalize,
    points_from_frame,
    run_kmeans,
)

logging.basicConfig(level=logging.INFO)

# =============================================================================
# 1. Nutrient table (per 100g)
# =============================================================================
foods = pd.DataFrame(
    {
        "food": [
            "apple", "banana", "orange", "chicken breast", "salmon",
            "tuna", "rice", "pasta", "bread", "almonds", "peanut butter",
        ],
        "calories": [52, 89, 47, 165, 208, 132, 130, 131, 265, 579, 588],
        "protein": [0.3, 1.1, 0.9, 31.0, 20.0, 28.0, 2.7, 5.0, 9.0, 21.0, 25.0],
        "carbs": [14.0, 23.0, 12.0, 0.0, 0.0, 0.0, 28.0, 25.0, 49.0, 22.0, 20.0],
        "fat": [0.2, 0.3, 0.1, 3.6, 13.0, 1.0, 0.3, 1.1, 3.2, 50.0, 50.0],
    }
)
features = ["calories", "protein", "carbs", "fat"]

points = points_from_frame(foods, features, name_column="food")

# =============================================================================
# 2. Normalize and cluster
# =============================================================================
settings = NutriclusterSettings()
result = run_kmeans(normalize(points), k=4, **settings.to_clustering_config().model_dump())

# =============================================================================
# 3. Inspect groups
# =============================================================================
print(f"Converged: {result.converged} after {result.n_iter} iterations")
for group in result.groups:
    centroid = ", ".join(
        f"{name}={value:.2f}" for name, value in zip(features, group.centroid)
    )
    members = ", ".join(point.name for point in group.points)
    print(f"Group {group.index} [{centroid}]: {members}")

metrics = compute_group_metrics(result.groups, inertia=result.inertia)
print(metrics)
