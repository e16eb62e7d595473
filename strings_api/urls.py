from django.urls import path

from .views import HealthView, NaturalLanguageFilterView, StringAnalyzerView, StringDetailView

urlpatterns = [
    path('', HealthView.as_view(), name='health'),
    path('strings', StringAnalyzerView.as_view(), name='analyze_string'),
    path('strings/filter-by-natural-language',
         NaturalLanguageFilterView.as_view(), name='nl_filter'),
    path('strings/<path:value>', StringDetailView.as_view(), name='string_detail'),
]
