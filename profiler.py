import logging
import time
from collections import OrderedDict

logger = logging.getLogger("global")

LABEL_WIDTH = 20


class Profiler:
    """Times sections of a hot loop (like the rain's frame loop).

    Call avg() after each section; every 'seconds_per_average' seconds the
    average and worst time of every section since the last report gets
    logged.
    """

    def __init__(self, seconds_per_average=2, clock=time.time):
        self.clock = clock
        self.last_recorded_time = clock()
        # label -> (total seconds, samples, max seconds)
        self.times_by_id = OrderedDict()
        self.seconds_per_average = seconds_per_average
        self.last_report_time = None
        self.enabled = True

    def time(self, identifier):
        """ Log time since the last time()/avg() call """
        if not self.enabled:
            return

        logger.info("%s: %.3fms", identifier,
                    self.increment_time_and_get_delta() * 1000)

    def avg(self, identifier):
        """ Record time since the last call under 'identifier', reporting
        averages once per seconds_per_average """
        if not self.enabled:
            return

        delta_time = self.increment_time_and_get_delta()

        total, samples, max_time = self.times_by_id.get(identifier, (0, 0, 0))
        self.times_by_id[identifier] = (total + delta_time, samples + 1,
                                        max(delta_time, max_time))

        now = self.last_recorded_time
        if self.last_report_time is None:
            self.last_report_time = now

        if now > self.last_report_time + self.seconds_per_average:
            self.report()
            self.last_report_time = now

    def report(self):
        logger.info("Average Times: ")
        for identifier, (total, samples, max_time) in self.times_by_id.items():
            if samples == 0:
                continue
            label = str(identifier).ljust(LABEL_WIDTH)[:LABEL_WIDTH]
            logger.info("%s: %.3fms max: %.3fms", label,
                        total / samples * 1000, max_time * 1000)

        # keep the keys so sections are reported in their first-seen order
        for identifier in self.times_by_id:
            self.times_by_id[identifier] = (0, 0, 0)

    def increment_time_and_get_delta(self):
        now = self.clock()
        delta_time = now - self.last_recorded_time
        self.last_recorded_time = now
        return delta_time
