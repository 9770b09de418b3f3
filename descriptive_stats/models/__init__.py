from .statistics import EngineConfig, StatisticsResult

__all__ = ['EngineConfig', 'StatisticsResult']
