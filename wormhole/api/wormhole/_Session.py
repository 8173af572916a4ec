"""Wiring of store, viewer and engine components used by the commands (private)."""

from dataclasses import dataclass
from pathlib import Path

from ..config.WormholeConfig import WormholeConfig
from ..map.MapStore import MapStore
from ..viewer._headless.HeadlessViewer import HeadlessViewer
from ..viewer.SpreadLayout import SpreadLayout
from .TargetMapResolver import TargetMapResolver
from .WormholeBuilder import WormholeBuilder
from .WormholeRestorer import WormholeRestorer
from .WormholeSynchronizer import WormholeSynchronizer


@dataclass
class _Session:
    store: MapStore
    viewer: HeadlessViewer
    resolver: TargetMapResolver
    synchronizer: WormholeSynchronizer
    builder: WormholeBuilder
    restorer: WormholeRestorer

    @classmethod
    def open(cls, config: WormholeConfig, target_path: str | Path | None = None) -> "_Session":
        store = MapStore(config.map)
        viewer = HeadlessViewer(store, target_path)
        resolver = TargetMapResolver(store, config.resolver)
        synchronizer = WormholeSynchronizer(store, viewer)
        builder = WormholeBuilder(
            store,
            viewer,
            layout=SpreadLayout(config.wormhole.spread_gap),
            wormhole_config=config.wormhole,
            synchronizer=synchronizer,
        )
        restorer = WormholeRestorer(store, viewer, resolver=resolver, synchronizer=synchronizer)
        return cls(store, viewer, resolver, synchronizer, builder, restorer)
