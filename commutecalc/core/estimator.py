"""
Worst-case commute estimation per destination
"""

import logging
from typing import Iterable, List, Optional

from commutecalc.distancematrix.client import DistanceMatrixClient
from commutecalc.distancematrix.models import PESSIMISTIC

from .durations import combine_durations
from .models import CommuteRecord, DurationStrategy, display_place
from .schedule import TargetTimes, arrive_home_at, depart_house_at


class CommuteEstimator:
    """
    Estimates Monday-morning and Friday-evening driving commutes
    between one home and a list of destinations

    Every query is issued sequentially; any failure aborts the run.
    """

    def __init__(
        self,
        client: DistanceMatrixClient,
        home: str,
        targets: TargetTimes,
        strategy: DurationStrategy = DurationStrategy.SUM,
        strict: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.home = home
        self.targets = targets
        self.strategy = strategy
        self.strict = strict
        self.logger = logger or logging.getLogger(__name__)

    async def _minutes(self, **query_args) -> int:
        query = self.client.build_query(**query_args)
        estimate = await self.client.fetch_estimate(query)
        return combine_durations(estimate, self.strategy, self.strict, log=self.logger)

    async def estimate(self, city: str) -> CommuteRecord:
        """
        Estimate the commute for one normalized destination

        Three queries are made:
            1. probe: arrive by Monday 9:00am, no traffic model allowed
            2. refined: depart at 9:00am minus the probe estimate,
               pessimistic traffic
            3. return: city to home departing Friday 5:00pm,
               pessimistic traffic

        Args:
            city: Destination, already query-delimited

        Returns:
            CommuteRecord for the destination
        """
        probe_minutes = await self._minutes(
            origin=self.home,
            destination=city,
            arrival_time=self.targets.arrival_epoch,
        )
        self.logger.debug("%s: probe estimate %d mins", city, probe_minutes)

        minutes_to_arrive = await self._minutes(
            origin=self.home,
            destination=city,
            departure_time=self.targets.departure_epoch_for(probe_minutes),
            traffic_model=PESSIMISTIC,
        )
        self.logger.debug("%s: refined estimate %d mins", city, minutes_to_arrive)

        minutes_to_return = await self._minutes(
            origin=city,
            destination=self.home,
            departure_time=self.targets.return_epoch,
            traffic_model=PESSIMISTIC,
        )
        self.logger.debug("%s: return estimate %d mins", city, minutes_to_return)

        return CommuteRecord(
            city=display_place(city),
            minutes_to_arrive=minutes_to_arrive,
            depart_house_at=depart_house_at(minutes_to_arrive),
            minutes_to_return=minutes_to_return,
            arrive_home_at=arrive_home_at(minutes_to_return),
        )

    async def estimate_all(self, cities: Iterable[str]) -> List[CommuteRecord]:
        """Estimate every destination in input order"""
        records = []
        for city in cities:
            self.logger.info("Estimating commute to %s", display_place(city))
            records.append(await self.estimate(city))
        return records
