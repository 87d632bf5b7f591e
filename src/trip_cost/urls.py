from django.urls import path

from trip_cost import views

urlpatterns = [
    path("api/v1/health", views.health_view, name="health"),
    path("api/v1/regions", views.regions_view, name="regions"),
    path("api/v1/fuel-prices", views.fuel_prices_view, name="fuel-prices"),
    path("api/v1/trip-cost", views.trip_cost_view, name="trip-cost"),
    path("api/v1/tools/fuel-cost", views.fuel_cost_view, name="tools-fuel-cost"),
    path("api/v1/tools/round-trip", views.round_trip_view, name="tools-round-trip"),
    path("api/v1/tools/compare", views.compare_view, name="tools-compare"),
    path("api/v1/tools/fuel-needed", views.fuel_needed_view, name="tools-fuel-needed"),
    path("api/v1/tools/max-distance", views.max_distance_view, name="tools-max-distance"),
    path("api/v1/tools/convert", views.convert_view, name="tools-convert"),
    path(
        "api/v1/tools/efficiency-category",
        views.efficiency_category_view,
        name="tools-efficiency-category",
    ),
    path(
        "api/v1/tools/annual-projection",
        views.annual_projection_view,
        name="tools-annual-projection",
    ),
]
