from app.models.load_test_record import LifecycleState, LoadTestRecord

__all__ = ['LifecycleState', 'LoadTestRecord']
