"""
Monitoring module for the spelling word bank.
Handles logging setup and optional CloudWatch metrics.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from spellbank.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level_name: Optional[str] = None) -> int:
    """
    Configure the root logger with a file handler and a stream handler.

    Args:
        level_name: Log level name; defaults to LOG_LEVEL from the environment

    Returns:
        The numeric level that was applied
    """
    settings = get_settings()
    level = getattr(logging, (level_name or settings.log_level).upper(), logging.INFO)
    handlers = [logging.StreamHandler()]
    try:
        settings.log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_dir / 'spellbank.log'))
    except OSError as e:
        logging.getLogger(__name__).warning(f"File logging disabled: {e}")
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
    logging.getLogger('spellbank').setLevel(level)
    return level


configure_logging()
logger = logging.getLogger(__name__)


class Monitor:
    """Publishes word bank metrics to CloudWatch when enabled, otherwise logs them."""

    def __init__(self, environment: str = 'Development', enabled: bool = False):
        self.environment = environment
        self.enabled = enabled
        self.namespace = f"SpellBank/{environment}"
        self._cloudwatch = None

    @property
    def cloudwatch(self):
        if self._cloudwatch is None:
            self._cloudwatch = boto3.client('cloudwatch')
        return self._cloudwatch

    def put_metric(self, metric_name: str, value: float, unit: str = 'Count',
                   dimensions: Optional[Dict[str, str]] = None) -> None:
        """
        Put a metric to CloudWatch.

        Args:
            metric_name: Name of the metric
            value: Metric value
            unit: Metric unit (e.g., 'Count', 'Milliseconds')
            dimensions: Optional dictionary of dimension name-value pairs
        """
        if not self.enabled:
            logger.debug(f"[METRIC] {metric_name}={value} {unit} {dimensions or {}}")
            return
        metric_data = {
            'MetricName': metric_name,
            'Value': value,
            'Unit': unit,
            'Timestamp': datetime.now(timezone.utc),
        }
        if dimensions:
            metric_data['Dimensions'] = [
                {'Name': k, 'Value': v} for k, v in dimensions.items()
            ]
        try:
            self.cloudwatch.put_metric_data(
                Namespace=self.namespace,
                MetricData=[metric_data]
            )
            logger.debug(f"Published metric {metric_name}: {value} {unit}")
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to publish metric {metric_name}: {str(e)}")

    def track_load(self, kind: str, key: str, added: int) -> None:
        """Track a tier or pack merge."""
        self.put_metric('WordsLoaded', added, dimensions={'Kind': kind, 'Key': key})

    def track_load_failure(self, kind: str, key: str) -> None:
        """Track a tier, pack or override fetch that failed."""
        self.put_metric('LoadFailures', 1, dimensions={'Kind': kind, 'Key': key})

    def track_bake_warnings(self, count: int) -> None:
        """Track words that baked with fewer than 2 distractors."""
        self.put_metric('BakeWarnings', count)


_monitor: Optional[Monitor] = None


def get_monitor() -> Monitor:
    """Global monitor instance, created on first use."""
    global _monitor
    if _monitor is None:
        settings = get_settings()
        _monitor = Monitor(settings.environment, enabled=settings.enable_cloudwatch)
    return _monitor
