"""Operations dashboard host and matplotlib visualization."""

import random
import time
from typing import Callable, Dict, List, Optional

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
import numpy as np

import config
from entities import Mission, Toast, ToastType, ActivityItem, Stats
from notifications import ToastManager
from queries import (
    filter_missions, next_status_filter, sort_by_priority,
    status_breakdown, fleet_summary
)
from scheduler import SimulatedClock, TickScheduler
from seed import (
    CHART_SERIES, seed_missions, seed_assets, seed_alerts,
    seed_activity_feed, seed_stats
)
from telemetry import DashboardState, run_tick


class Dashboard:
    """
    Hosts the telemetry engine and renders it.

    The dashboard holds the only "current" reference to the state snapshot
    and replaces it after every tick. The toast manager owns the toast set;
    the scheduler owns the tick timer.
    """

    STATUS_COLORS = {
        'active': '#10b981',
        'completed': '#06b6d4',
        'standby': '#f59e0b',
        'charging': '#3b82f6',
        'maintenance': '#64748b',
    }
    TOAST_MARKERS = {
        ToastType.SUCCESS: '[OK]',
        ToastType.WARNING: '[!!]',
        ToastType.INFO: '[i]',
    }

    def __init__(
        self,
        state: Optional[DashboardState] = None,
        rng=None,
        clock: Callable[[], float] = time.monotonic,
        tick_interval: float = config.TICK_INTERVAL,
        query: str = "",
        status_filter: str = config.STATUS_FILTER_ALL,
        debug: bool = False
    ):
        """
        Initialize the dashboard.

        Args:
            state: Initial snapshot (defaults to the seed data)
            rng: Random source with a random() method (defaults to random.Random())
            clock: Time source shared by the scheduler and toasts
            tick_interval: Seconds between telemetry ticks
            query: Initial mission search text
            status_filter: Initial status filter ("all" or a mission status)
            debug: If True, print per-tick telemetry
        """
        self.state = state if state is not None else DashboardState(
            missions=tuple(seed_missions()),
            stats=seed_stats(),
            activity_feed=tuple(seed_activity_feed()),
            assets=tuple(seed_assets()),
            alerts=tuple(seed_alerts()),
        )
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.debug = debug

        self.query = query
        self.status_filter = status_filter

        self.toasts = ToastManager(clock=clock)
        self.scheduler = TickScheduler(interval=tick_interval, clock=clock)

        # Visualization
        self.fig = None
        self.ax_missions = None
        self.ax_status = None
        self.ax_dashboard = None
        self.dashboard_text = None

        # Run state
        self.is_running = False
        self.started_at = None
        self.completed_missions: List[str] = []

    # ========== Lifecycle ==========

    def mount(self) -> None:
        """Start the telemetry tick. Mounting twice keeps a single timer."""
        self.started_at = self.clock()
        self.scheduler.mount(self.tick)
        print(f"[Dashboard] Mounted with {len(self.state.missions)} missions")

    def unmount(self) -> None:
        """Stop the telemetry tick. Pending toast expiries stay harmless."""
        self.scheduler.teardown()
        self.is_running = False

    @property
    def is_mounted(self) -> bool:
        return self.scheduler.is_mounted

    def tick(self, now: Optional[float] = None) -> None:
        """Run one telemetry tick and commit the resulting snapshot."""
        if now is None:
            now = self.clock()

        result = run_tick(
            self.state, self.rng, now,
            on_complete=lambda mission: self._notify_completion(mission, now),
            debug=self.debug
        )
        self.completed_missions.extend(result.completed)
        self.state = result.state

    def poll(self, now: Optional[float] = None) -> bool:
        """
        Advance timers: fire a due tick and drop expired toasts.

        Returns:
            True if a tick ran
        """
        if now is None:
            now = self.clock()
        ticked = self.scheduler.poll(now)
        self.toasts.expire(now)
        return ticked

    def _notify_completion(self, mission: Mission, now: float) -> None:
        self.toasts.enqueue(f"Mission {mission.mission_id} completed!", ToastType.SUCCESS, now=now)

    # ========== User input ==========

    def set_query(self, query: str) -> None:
        self.query = query

    def set_status_filter(self, status_filter: str) -> None:
        """Set the status filter. Unknown statuses simply match no missions."""
        self.status_filter = status_filter

    def dismiss_toast(self, toast_id: int) -> bool:
        return self.toasts.dismiss(toast_id)

    # ========== Read-only projections ==========

    @property
    def missions(self) -> List[Mission]:
        return list(self.state.missions)

    @property
    def stats(self) -> Stats:
        return self.state.stats

    @property
    def activity_feed(self) -> List[ActivityItem]:
        return list(self.state.activity_feed)

    @property
    def active_toasts(self) -> List[Toast]:
        return self.toasts.active()

    @property
    def filtered_missions(self) -> List[Mission]:
        return filter_missions(self.state.missions, self.query, self.status_filter)

    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        return self.clock() - self.started_at

    def get_status(self) -> Dict:
        """Get a summary of the current dashboard state."""
        return {
            'missions': [m.to_dict() for m in self.state.missions],
            'stats': self.state.stats.to_dict(),
            'activity_feed': [item.to_dict() for item in self.state.activity_feed],
            'toasts': [t.to_dict() for t in self.active_toasts],
            'filtered': [m.mission_id for m in self.filtered_missions],
            'status_breakdown': status_breakdown(self.state.missions),
            'fleet': fleet_summary(self.state.assets),
            'completed_missions': list(self.completed_missions),
            'ticks': self.scheduler.tick_count,
        }

    # ========== Visualization ==========

    def setup_plot(self) -> None:
        """Set up the matplotlib figure: missions, status breakdown, and text panel."""
        self.fig = plt.figure(figsize=(16, 9))
        self.fig.suptitle('NEXUS Command Center - Real-time Operations', fontsize=14, fontweight='bold')

        # Mission progress (left)
        self.ax_missions = self.fig.add_axes([0.06, 0.38, 0.5, 0.52])

        # Status breakdown (bottom left)
        self.ax_status = self.fig.add_axes([0.06, 0.03, 0.5, 0.3])

        # Dashboard panel (right)
        self.ax_dashboard = self.fig.add_axes([0.6, 0.03, 0.38, 0.87])
        self.ax_dashboard.set_xlim(0, 1)
        self.ax_dashboard.set_ylim(0, 1)
        self.ax_dashboard.axis('off')

        self.dashboard_text = self.ax_dashboard.text(
            0.02, 0.98, '', transform=self.ax_dashboard.transAxes,
            verticalalignment='top', fontsize=9,
            fontfamily='monospace',
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.9, edgecolor='gray')
        )

        self.fig.canvas.mpl_connect('key_press_event', self._on_key_press)

    def _on_key_press(self, event) -> None:
        """Handle key press events."""
        if event.key == 'q':
            self.unmount()
            plt.close(self.fig)
        elif event.key == 'x':
            self.toasts.dismiss_oldest()
        elif event.key == 'f':
            self.set_status_filter(next_status_filter(self.status_filter))
            print(f"[Dashboard] Status filter: {self.status_filter}")

    def _draw_missions(self) -> None:
        """Draw progress bars for the filtered missions."""
        ax = self.ax_missions
        ax.clear()

        missions = sort_by_priority(self.filtered_missions)
        ax.set_xlim(0, 110)
        ax.set_xlabel('Progress (%)')
        ax.set_title(f"Missions  [search: '{self.query}'  status: {self.status_filter}]", fontsize=10)

        if not missions:
            ax.text(55, 0.5, 'No missions match', ha='center', va='center', color='gray')
            ax.set_yticks([])
            return

        positions = np.arange(len(missions))
        progress = np.array([m.progress for m in missions])
        colors = [self.STATUS_COLORS[m.status.value] for m in missions]

        ax.barh(positions, progress, color=colors, height=0.6)
        ax.set_yticks(positions)
        ax.set_yticklabels([f"{m.mission_id} {m.name}" for m in missions], fontsize=9)
        ax.invert_yaxis()

        for y, mission in zip(positions, missions):
            ax.text(
                min(mission.progress, 100) + 1, y,
                f"{mission.progress:.1f}%  bat {mission.battery:.1f}%  {mission.asset_id}",
                va='center', fontsize=8
            )

    def _draw_status_breakdown(self) -> None:
        ax = self.ax_status
        ax.clear()
        breakdown = status_breakdown(self.state.missions)
        if not breakdown:
            ax.axis('off')
            return
        ax.pie(
            list(breakdown.values()),
            labels=[name.capitalize() for name in breakdown],
            colors=[self.STATUS_COLORS[name] for name in breakdown],
            autopct='%1.0f%%', textprops={'fontsize': 8}
        )
        ax.set_title('Mission Status', fontsize=10)

    def _generate_dashboard_content(self) -> str:
        """Generate the text panel: stats, toasts, alerts, fleet, activity feed."""
        lines = []
        stats = self.state.stats

        lines.append(f"{'═' * 44}")
        lines.append(f"  TIME: {self.elapsed():.1f}s  |  TICKS: {self.scheduler.tick_count}")
        lines.append(f"{'═' * 44}")
        lines.append(f"  Active missions: {stats.active_missions}")
        lines.append(f"  Total assets:    {stats.total_assets}")
        lines.append(f"  System health:   {stats.system_health:.1f}%")
        lines.append(f"  Success rate:    {stats.success_rate:.1f}%")
        lines.append("")

        toasts = self.active_toasts
        lines.append(f"NOTIFICATIONS ({len(toasts)})")
        if toasts:
            now = self.clock()
            for toast in toasts:
                remaining = max(0.0, toast.expires_at - now)
                lines.append(f"  {self.TOAST_MARKERS[toast.toast_type]} {toast.message} ({remaining:.1f}s)")
        else:
            lines.append("  (none)")
        lines.append("")

        lines.append("ALERTS")
        for alert in self.state.alerts:
            lines.append(f"  {alert.kind.value.upper():<8} {alert.message} ({alert.time})")
        lines.append("")

        fleet = fleet_summary(self.state.assets)
        lines.append("FLEET")
        lines.append(f"  Assets: {fleet['total_assets']}  |  Missions flown: {fleet['total_missions']}")
        lines.append(f"  Mean battery: {fleet['mean_battery']:.0f}%  |  Mean signal: {fleet['mean_signal']:.0f}%")
        if fleet['low_battery']:
            lines.append(f"  Low battery: {', '.join(fleet['low_battery'])}")
        lines.append("")

        volume = np.array([point['missions'] for point in CHART_SERIES])
        efficiency = np.array([point['efficiency'] for point in CHART_SERIES])
        peak = CHART_SERIES[int(volume.argmax())]['time']
        lines.append("ANALYTICS (24h)")
        lines.append(f"  Missions: {volume.sum()}  |  Peak: {peak}  |  Efficiency: {efficiency.mean():.1f}%")
        lines.append("")

        lines.append("ACTIVITY")
        for item in self.state.activity_feed:
            lines.append(f"  [{item.category.value:<7}] {item.event} - {item.time}")
        lines.append("")

        lines.append("  'f' filter  |  'x' dismiss toast  |  'q' quit")
        return '\n'.join(lines)

    def update_visualization(self) -> None:
        """Redraw every panel from the current snapshot."""
        self._draw_missions()
        self._draw_status_breakdown()
        if self.dashboard_text:
            self.dashboard_text.set_text(self._generate_dashboard_content())

    # ========== Run loop ==========

    def _advance_frame(self) -> None:
        """Move time forward by one frame and process due timers."""
        if isinstance(self.clock, SimulatedClock):
            self.clock.advance(config.FRAME_INTERVAL)
        self.poll()

    def run(self, max_time: float = 120.0, show_animation: bool = True) -> dict:
        """
        Run the dashboard until max_time seconds have elapsed or the user quits.

        With a SimulatedClock the loop advances time itself and runs as fast as
        possible; with a real clock it follows wall time.
        """
        self.is_running = True
        self.mount()
        realtime = not isinstance(self.clock, SimulatedClock)

        if show_animation:
            self.setup_plot()
            self.update_visualization()

            def animate(frame):
                if not self.is_running:
                    return

                self._advance_frame()
                self.update_visualization()

                if self.elapsed() >= max_time:
                    self.unmount()
                    self._print_final_stats()

            anim = FuncAnimation(
                self.fig, animate,
                interval=int(config.FRAME_INTERVAL * 1000) if realtime else 1,
                cache_frame_data=False
            )
            plt.show(block=True)
            # Window closed without pressing q
            self.unmount()
        else:
            while self.is_running and self.elapsed() < max_time:
                if realtime:
                    time.sleep(config.FRAME_INTERVAL)
                self._advance_frame()

            print(f"\n[Dashboard] Completed at {self.elapsed():.1f}s")
            self.unmount()
            self._print_final_stats()

        return {
            'final_time': self.elapsed(),
            'status': self.get_status(),
        }

    def _print_final_stats(self) -> None:
        """Print final dashboard statistics."""
        status = self.get_status()

        print("\n" + "=" * 50)
        print("DASHBOARD STOPPED")
        print("=" * 50)
        print(f"Ticks: {status['ticks']}")
        print(f"System health: {status['stats']['system_health']:.2f}%")
        print(f"Missions completed this run: {len(self.completed_missions)}")
        for mission in self.state.missions:
            print(f"  {mission.mission_id} {mission.name:<16} {mission.status.value:<11} "
                  f"{mission.progress:6.2f}%  battery {mission.battery:5.2f}%")
        print(f"Activity feed entries: {len(status['activity_feed'])}")
        print(f"Visible toasts: {len(status['toasts'])}")
        print("=" * 50)


if __name__ == '__main__':
    dashboard = Dashboard(rng=random.Random(7), clock=SimulatedClock(), debug=True)
    dashboard.run(max_time=60.0, show_animation=False)
