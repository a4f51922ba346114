"""Pizza API: HTTP facade over a managed Elasticsearch index of pizzas."""
