"""
Повторяющиеся задачи для игрового цикла.

Вместо системного таймера: основной цикл pygame вызывает advance(dt)
с прошедшими миллисекундами, а каждая задача срабатывает столько раз,
сколько её интервал укладывается в накопленное время.
В тестах advance() вызывается напрямую.
"""


class RepeatingTask:
    def __init__(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self.elapsed_ms = 0.0
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def set_interval(self, interval_ms):
        """Новый интервал действует с текущего накопленного времени"""
        self.interval_ms = interval_ms

    def _advance(self, dt_ms):
        fired = 0
        self.elapsed_ms += dt_ms
        while not self.cancelled and self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms -= self.interval_ms
            self.callback()
            fired += 1
        return fired


class Scheduler:
    def __init__(self):
        self.tasks = []

    def schedule(self, interval_ms, callback):
        """Запустить callback каждые interval_ms, вернуть задачу для отмены"""
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        task = RepeatingTask(interval_ms, callback)
        self.tasks = [t for t in self.tasks if not t.cancelled]
        self.tasks.append(task)
        return task

    def advance(self, dt_ms):
        """Прокрутить время на dt_ms, вернуть число срабатываний"""
        fired = 0
        # Копия: callback может отменить или добавить задачи
        for task in list(self.tasks):
            if not task.cancelled:
                fired += task._advance(dt_ms)
        self.tasks = [task for task in self.tasks if not task.cancelled]
        return fired

    def cancel_all(self):
        for task in self.tasks:
            task.cancel()
        self.tasks = []
