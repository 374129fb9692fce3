from typing import Any

# Tool metadata published on GET /discovery for the orchestration platform.
TOOLS: list[dict[str, Any]] = [
    {
        "name": "calculate_experiment_runtime",
        "description": "Calculates the estimated time to run an experiment.",
        "endpoint": "/tools/calculate_experiment_runtime",
        "http_method": "POST",
        "parameters": [
            {
                "name": "BCR",
                "type": "number",
                "description": "The conversion rate of the control group (e.g., 0.1 for 10%)",
                "required": True,
            },
            {
                "name": "MDE",
                "type": "number",
                "description": "The relative lift you want to detect (e.g., 0.05 for 5%)",
                "required": True,
            },
            {
                "name": "sigLevel",
                "type": "number",
                "description": "The desired statistical significance (e.g., 95 for 95%)",
                "required": True,
            },
            {
                "name": "numVariations",
                "type": "number",
                "description": "The total number of variations, including control",
                "required": True,
            },
            {
                "name": "dailyVisitors",
                "type": "number",
                "description": "The number of visitors per day participating in the experiment",
                "required": True,
            },
            {
                "name": "power",
                "type": "number",
                "description": "Statistical power as a fraction (defaults to 0.8)",
                "required": False,
            },
        ],
    },
    {
        "name": "get_images",
        "description": "Searches Unsplash for landscape images matching a query.",
        "endpoint": "/tools/get_images",
        "http_method": "POST",
        "parameters": [
            {
                "name": "query",
                "type": "string",
                "description": "Search terms for the images",
                "required": True,
            },
            {
                "name": "perPage",
                "type": "number",
                "description": "Number of images to return (1-30, default 5)",
                "required": False,
            },
        ],
    },
    {
        "name": "get_random_images",
        "description": "Fetches random landscape images from Unsplash for a topic.",
        "endpoint": "/tools/get_random_images",
        "http_method": "POST",
        "parameters": [
            {
                "name": "query",
                "type": "string",
                "description": "Topic the random images should match",
                "required": True,
            },
            {
                "name": "count",
                "type": "number",
                "description": "Number of images to return (1-30, default 5)",
                "required": False,
            },
        ],
    },
]


def discovery_document() -> dict[str, Any]:
    return {"functions": TOOLS}
