import logging
import os

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws
from unittest.mock import Mock, patch

from spellbank import monitoring
from spellbank.monitoring import Monitor, configure_logging, get_monitor


@pytest.fixture
def aws_credentials():
    """Mocked AWS Credentials for moto."""
    with patch.dict('os.environ', {
        'AWS_ACCESS_KEY_ID': 'testing',
        'AWS_SECRET_ACCESS_KEY': 'testing',
        'AWS_SECURITY_TOKEN': 'testing',
        'AWS_SESSION_TOKEN': 'testing',
        'AWS_DEFAULT_REGION': 'us-east-1',
    }):
        yield


@pytest.mark.unit
def test_disabled_monitor_does_not_call_aws():
    monitor = Monitor(enabled=False)
    monitor._cloudwatch = Mock()
    monitor.track_load('tier', '1', 28)
    monitor._cloudwatch.put_metric_data.assert_not_called()


@pytest.mark.unit
def test_put_metric_payload():
    monitor = Monitor(environment='Testing', enabled=True)
    monitor._cloudwatch = Mock()

    monitor.track_load_failure('pack', 'scripps')

    kwargs = monitor._cloudwatch.put_metric_data.call_args.kwargs
    assert kwargs['Namespace'] == 'SpellBank/Testing'
    metric = kwargs['MetricData'][0]
    assert metric['MetricName'] == 'LoadFailures'
    assert metric['Value'] == 1
    assert {'Name': 'Key', 'Value': 'scripps'} in metric['Dimensions']


@pytest.mark.unit
def test_client_error_is_logged_not_raised(caplog):
    monitor = Monitor(enabled=True)
    monitor._cloudwatch = Mock()
    monitor._cloudwatch.put_metric_data.side_effect = ClientError(
        {'Error': {'Code': 'Throttling', 'Message': 'slow down'}}, 'PutMetricData'
    )
    with caplog.at_level(logging.ERROR, logger='spellbank.monitoring'):
        monitor.track_bake_warnings(4)
    assert 'BakeWarnings' in caplog.text


@pytest.mark.integration
def test_metrics_reach_cloudwatch(aws_credentials):
    with mock_aws():
        monitor = Monitor(environment='Testing', enabled=True)
        monitor.track_load('tier', '2', 20)

        client = boto3.client('cloudwatch', region_name='us-east-1')
        metrics = client.list_metrics(Namespace='SpellBank/Testing')['Metrics']
        assert [m['MetricName'] for m in metrics] == ['WordsLoaded']


@pytest.mark.unit
def test_get_monitor_reads_environment():
    with patch.dict('os.environ', {'ENABLE_CLOUDWATCH': 'true', 'ENVIRONMENT': 'Staging'}), \
         patch.object(monitoring, '_monitor', None):
        monitor = get_monitor()
        assert monitor.enabled is True
        assert monitor.namespace == 'SpellBank/Staging'


@pytest.mark.unit
def test_configure_logging_writes_file(tmp_path):
    with patch.dict('os.environ', {'LOG_DIR': str(tmp_path), 'LOG_LEVEL': 'DEBUG'}):
        level = configure_logging()
    assert level == logging.DEBUG
    assert os.path.exists(tmp_path / 'spellbank.log')
    configure_logging('INFO')
