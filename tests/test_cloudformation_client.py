"""Tests for the boto3-backed CloudFormationClient."""

from datetime import datetime, timezone

import boto3
import pytest
from botocore.stub import Stubber

from stackwatch.client import CloudFormationClient, CloudFormationError, StackNotFoundError
from stackwatch.models import IN_PROGRESS_STATUSES, StackRef

REGION = "eu-west-1"
ARN = "arn:aws:cloudformation:eu-west-1:0123456789012:stack/test-stack/1"
TS = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client():
    """Create a client with a credentialed session."""
    session = boto3.session.Session(
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name=REGION,
    )
    return CloudFormationClient(region=REGION, session=session)


@pytest.fixture
def stubber(client):
    """Stub the regional boto3 client."""
    stub = Stubber(client._client_for(REGION))
    stub.activate()
    yield stub
    stub.deactivate()


def stack_event(event_id, status, reason=None):
    item = {
        "StackId": ARN,
        "EventId": event_id,
        "StackName": "test-stack",
        "LogicalResourceId": "test-stack",
        "PhysicalResourceId": ARN,
        "ResourceType": "AWS::CloudFormation::Stack",
        "Timestamp": TS,
        "ResourceStatus": status,
    }
    if reason:
        item["ResourceStatusReason"] = reason
    return item


class TestDescribeStack:
    """Tests for CloudFormationClient.describe_stack()."""

    @pytest.mark.asyncio
    async def test_describe_stack(self, client, stubber):
        """Test resolving an ARN to a stack and its status."""
        stubber.add_response(
            "describe_stacks",
            {
                "Stacks": [
                    {
                        "StackName": "test-stack",
                        "StackId": ARN,
                        "StackStatus": "UPDATE_IN_PROGRESS",
                        "CreationTime": TS,
                    }
                ]
            },
            {"StackName": ARN},
        )

        description = await client.describe_stack(ARN)

        assert description.stack == StackRef(name="test-stack", stack_id=ARN)
        assert description.stack.name == "test-stack"
        assert description.stack.region == REGION
        assert description.status == "UPDATE_IN_PROGRESS"
        stubber.assert_no_pending_responses()

    @pytest.mark.asyncio
    async def test_describe_missing_stack(self, client, stubber):
        """Test that a missing stack raises StackNotFoundError."""
        stubber.add_client_error(
            "describe_stacks",
            service_error_code="ValidationError",
            service_message=f"Stack with id {ARN} does not exist",
            http_status_code=400,
        )

        with pytest.raises(StackNotFoundError):
            await client.describe_stack(ARN)

    @pytest.mark.asyncio
    async def test_describe_other_error(self, client, stubber):
        """Test that other service errors raise CloudFormationError."""
        stubber.add_client_error(
            "describe_stacks",
            service_error_code="AccessDenied",
            service_message="Something went wrong",
            http_status_code=403,
        )

        with pytest.raises(CloudFormationError) as exc_info:
            await client.describe_stack(ARN)

        assert not isinstance(exc_info.value, StackNotFoundError)


class TestPullEvents:
    """Tests for CloudFormationClient.pull_events()."""

    @pytest.mark.asyncio
    async def test_first_page(self, client, stubber):
        """Test reading the newest page and its cursor."""
        stubber.add_response(
            "describe_stack_events",
            {
                "StackEvents": [
                    stack_event("0002", "UPDATE_COMPLETE"),
                    stack_event("0001", "UPDATE_IN_PROGRESS", "User Initiated"),
                ],
                "NextToken": "page-2",
            },
            {"StackName": ARN},
        )

        events, cursor = await client.pull_events(
            StackRef(name="test-stack", stack_id=ARN, region=REGION)
        )

        assert [event.event_id for event in events] == ["0002", "0001"]
        assert events[1].is_start_marker
        assert cursor == "page-2"

    @pytest.mark.asyncio
    async def test_next_page(self, client, stubber):
        """Test that the cursor is sent as NextToken."""
        stubber.add_response(
            "describe_stack_events",
            {"StackEvents": [stack_event("0000", "CREATE_COMPLETE")]},
            {"StackName": ARN, "NextToken": "page-2"},
        )

        events, cursor = await client.pull_events(
            StackRef(name="test-stack", stack_id=ARN, region=REGION), "page-2"
        )

        assert len(events) == 1
        assert cursor is None

    @pytest.mark.asyncio
    async def test_pull_error(self, client, stubber):
        """Test that read failures raise CloudFormationError."""
        stubber.add_client_error(
            "describe_stack_events",
            service_error_code="Throttling",
            service_message="Rate exceeded",
            http_status_code=400,
        )

        with pytest.raises(CloudFormationError):
            await client.pull_events(StackRef(name="test-stack", stack_id=ARN, region=REGION))


class TestListStacks:
    """Tests for CloudFormationClient.list_stacks()."""

    @pytest.mark.asyncio
    async def test_list_stacks(self, client, stubber):
        """Test listing stacks with a status filter."""
        stubber.add_response(
            "list_stacks",
            {
                "StackSummaries": [
                    {
                        "StackId": ARN,
                        "StackName": "test-stack",
                        "CreationTime": TS,
                        "StackStatus": "UPDATE_IN_PROGRESS",
                    }
                ]
            },
            {"StackStatusFilter": sorted(IN_PROGRESS_STATUSES)},
        )

        summaries = await client.list_stacks(IN_PROGRESS_STATUSES)

        assert len(summaries) == 1
        assert summaries[0].stack_id == ARN
        assert summaries[0].name == "test-stack"
