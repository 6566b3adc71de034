import django_filters

from .api import RANKING_GROUPS
from .models import University


class UniversityFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(field_name='name', lookup_expr='icontains')
    location = django_filters.CharFilter(field_name='location', lookup_expr='exact')
    country = django_filters.CharFilter(field_name='location', lookup_expr='icontains')
    ranking_group = django_filters.ChoiceFilter(
        choices=[(group, group) for group in RANKING_GROUPS],
        method='filter_ranking_group',
    )

    class Meta:
        model = University
        fields = ['search', 'location', 'country', 'ranking_group']

    def filter_ranking_group(self, queryset, name, value):
        lower, upper = RANKING_GROUPS[value]
        queryset = queryset.filter(ranking__lte=upper)
        if lower is not None:
            queryset = queryset.filter(ranking__gt=lower)
        return queryset
