"""Tests for TraceLocator."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from trace_frontend.config import DEFAULT_SERVICE_NAME
from trace_frontend.models import (
    ErrorCategory,
    LogicalIdentity,
    OutcomeKind,
    TraceRequest,
)
from trace_frontend.resolver import TraceLocator, bucket
from trace_frontend.store import StoreError

from helpers import make_span, make_trace


class TestBuildQuery:
    """Tests for TraceLocator.build_query()."""

    def test_cluster_is_operation(self, locator):
        """Test that the cluster becomes the operation and the service is fixed."""
        ts = datetime(2023, 1, 1, 10, 5, tzinfo=timezone.utc)
        identity = LogicalIdentity(cluster="prod", resource="pods", name="foo", timestamp=ts)
        query = locator.build_query(identity, bucket(ts))

        assert query.service_name == DEFAULT_SERVICE_NAME
        assert query.operation_name == "prod"
        assert query.tags == {"resource": "pods", "name": "foo"}
        assert query.window == bucket(ts)

    def test_namespace_included_when_set(self, locator):
        """Test that a namespace tag is added only when non-empty."""
        ts = datetime(2023, 1, 1, 10, 5, tzinfo=timezone.utc)
        identity = LogicalIdentity(
            cluster="prod", resource="pods", name="foo", timestamp=ts, namespace="default"
        )
        query = locator.build_query(identity, bucket(ts))
        assert query.tags == {"resource": "pods", "name": "foo", "namespace": "default"}

    def test_custom_service_and_limit(self, store, registry):
        """Test that service name and limit are configurable."""
        locator = TraceLocator(store, registry, service_name="custom", query_limit=5)
        ts = datetime(2023, 1, 1, 10, 5, tzinfo=timezone.utc)
        identity = LogicalIdentity(cluster="prod", resource="pods", name="foo", timestamp=ts)
        query = locator.build_query(identity, bucket(ts))
        assert query.service_name == "custom"
        assert query.limit == 5


class TestLocateValidation:
    """Tests for request validation before any store call."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["cluster", "resource", "name"])
    async def test_empty_field(self, locator, store, trace_request, field):
        """Test that an empty required field fails without a store call."""
        outcome = await locator.locate(replace(trace_request, **{field: ""}))

        assert outcome.kind is OutcomeKind.VALIDATION_FAILURE
        assert outcome.category is ErrorCategory.EMPTY_PARAM
        assert store.call_count == 0

    @pytest.mark.asyncio
    async def test_unknown_cluster(self, locator, store, trace_request):
        """Test that an unregistered cluster fails without a store call."""
        outcome = await locator.locate(replace(trace_request, cluster="dev"))

        assert outcome.kind is OutcomeKind.UNKNOWN_CLUSTER
        assert outcome.category is ErrorCategory.UNKNOWN_CLUSTER
        assert "dev" in outcome.message
        assert store.call_count == 0

    @pytest.mark.asyncio
    async def test_cluster_case_insensitive(self, locator, store, trace_request):
        """Test that cluster membership ignores case."""
        store.found = [make_trace()]
        outcome = await locator.locate(replace(trace_request, cluster="staging"))
        assert outcome.ok

        outcome = await locator.locate(replace(trace_request, cluster="PROD"))
        assert outcome.ok
        # Operation keeps the caller's spelling
        assert store.find_calls[-1].operation_name == "PROD"

    @pytest.mark.asyncio
    async def test_invalid_timestamp(self, locator, store, trace_request):
        """Test that an unparsable ts fails without a store call."""
        outcome = await locator.locate(replace(trace_request, ts="not-a-time"))

        assert outcome.kind is OutcomeKind.VALIDATION_FAILURE
        assert outcome.category is ErrorCategory.INVALID_TIMESTAMP
        assert store.call_count == 0

    @pytest.mark.asyncio
    async def test_empty_checked_before_cluster(self, locator, trace_request):
        """Test that empty fields are reported before unknown clusters."""
        outcome = await locator.locate(replace(trace_request, cluster="dev", name=""))
        assert outcome.category is ErrorCategory.EMPTY_PARAM

    @pytest.mark.asyncio
    async def test_cluster_checked_before_timestamp(self, locator, trace_request):
        """Test that unknown clusters are reported before bad timestamps."""
        outcome = await locator.locate(replace(trace_request, cluster="dev", ts="bad"))
        assert outcome.category is ErrorCategory.UNKNOWN_CLUSTER


class TestLocateResults:
    """Tests for match policy on store results."""

    @pytest.mark.asyncio
    async def test_exactly_one(self, locator, store, trace_request):
        """Test that a single match succeeds with that trace."""
        trace = make_trace()
        store.found = [trace]

        outcome = await locator.locate(trace_request)

        assert outcome.ok
        assert outcome.trace is trace
        assert len(store.find_calls) == 1
        query = store.find_calls[0]
        assert query.window.start == datetime(2023, 1, 1, 10, 0, tzinfo=timezone.utc)
        assert query.window.end == datetime(2023, 1, 1, 10, 30, tzinfo=timezone.utc)
        assert query.tags == {"resource": "pods", "name": "foo-123"}

    @pytest.mark.asyncio
    async def test_namespace_forwarded(self, locator, store, trace_request):
        """Test that the namespace reaches the query tags."""
        store.found = [make_trace()]
        await locator.locate(replace(trace_request, namespace="kube-system"))
        assert store.find_calls[0].tags["namespace"] == "kube-system"

    @pytest.mark.asyncio
    async def test_no_match(self, locator, store, trace_request):
        """Test that zero results is NO_MATCH."""
        outcome = await locator.locate(trace_request)

        assert outcome.kind is OutcomeKind.NO_MATCH
        assert outcome.category is ErrorCategory.NO_TRACE_MATCH
        assert outcome.status_code == 404

    @pytest.mark.asyncio
    async def test_ambiguous_match(self, locator, store, trace_request):
        """Test that several results are an error, not the first one."""
        store.found = [
            make_trace("a", make_span(trace_id="a")),
            make_trace("b", make_span(trace_id="b")),
        ]

        outcome = await locator.locate(trace_request)

        assert outcome.kind is OutcomeKind.AMBIGUOUS_MATCH
        assert outcome.category is ErrorCategory.MULTI_TRACE_MATCH
        assert outcome.trace is None
        assert outcome.status_code == 500
        assert "2" in outcome.message

    @pytest.mark.asyncio
    async def test_store_failure_not_retried(self, locator, store, trace_request):
        """Test that a store error is terminal and not retried."""
        store.find_error = StoreError("connection refused")

        outcome = await locator.locate(trace_request)

        assert outcome.kind is OutcomeKind.STORE_FAILURE
        assert outcome.category is ErrorCategory.TRACE_ERROR
        assert "connection refused" in outcome.message
        assert len(store.find_calls) == 1

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(self, locator, store, trace_request):
        """Test that non-store errors are not turned into outcomes."""
        async def boom(query):
            raise RuntimeError("bug")

        store.find_traces = boom
        with pytest.raises(RuntimeError):
            await locator.locate(trace_request)
