"""
Django REST Framework serializers for voting app.

These serializers handle JSON serialization/deserialization for:
- Vote casting
- Tally results
"""

from rest_framework import serializers

from .strategies import StrategyKind


class CastVoteSerializer(serializers.Serializer):
    """
    Serializer for casting a vote.

    Unknown candidates are accepted here: they are ignored when the vote is
    applied. The weight is only read for weighted voting; out of range values
    are clamped by the strategy, not rejected.
    """
    candidate = serializers.CharField(trim_whitespace=False)
    strategy = serializers.ChoiceField(
        choices=StrategyKind.choices(),
        default=StrategyKind.SIMPLE.value
    )
    weight = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def validate_strategy(self, value):
        """Return the strategy as a StrategyKind."""
        return StrategyKind(value)

    def validate(self, data):
        """
        Parse the weight for weighted votes; default to 1 otherwise.
        """
        raw_weight = data.get('weight')

        if data['strategy'] is StrategyKind.WEIGHTED and raw_weight not in (None, ''):
            try:
                data['weight'] = serializers.IntegerField().run_validation(raw_weight)
            except serializers.ValidationError as e:
                raise serializers.ValidationError({'weight': e.detail})
        else:
            data['weight'] = 1

        return data


class CandidateResultSerializer(serializers.Serializer):
    """
    One row of the results table.
    """
    candidate = serializers.CharField()
    votes = serializers.IntegerField()
    percentage = serializers.FloatField()


class TallySerializer(serializers.Serializer):
    """
    Serializer for a TallyStore.
    Shows counts and percentages for each candidate, in candidate order.
    """
    counts = serializers.SerializerMethodField()
    results = serializers.SerializerMethodField()
    total_votes = serializers.SerializerMethodField()

    def get_counts(self, obj):
        return obj.as_dict()

    def get_results(self, obj):
        return CandidateResultSerializer(obj.results(), many=True).data

    def get_total_votes(self, obj):
        """Total weight of all votes cast."""
        return obj.total


class VoteResponseSerializer(serializers.Serializer):
    """
    Serializer for vote response.
    Returns what was applied and the updated tally.
    """
    success = serializers.SerializerMethodField()
    counted = serializers.BooleanField()
    candidate = serializers.CharField()
    strategy = serializers.SerializerMethodField()
    increment = serializers.IntegerField()
    tally = TallySerializer()

    def get_success(self, obj):
        return True

    def get_strategy(self, obj):
        return obj.strategy.value
