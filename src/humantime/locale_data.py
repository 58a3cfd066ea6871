"""Locale data for relative phrases and calendar dates.

Patterns follow CLDR conventions. Relative-time templates use ``{0}`` for
the magnitude. Date patterns use CLDR field letters (y, M, d, E, H, h, m,
a) with quoted literals, e.g. ``"d 'de' MMM 'de' y"``.

Locales without their own entry fall back to the language entry and then
to English.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from humantime.locale import LocaleInfo
from humantime.plural import PluralCategory


# ==============================================================================
# Relative Time Data
# ==============================================================================

@dataclass(frozen=True)
class RelativeTimeUnit:
    """Relative time unit patterns.

    ``two``, ``few`` and ``many`` forms are only needed by languages that
    distinguish them; otherwise the ``other`` form is used.
    """
    past_one: str
    past_other: str
    future_one: str
    future_other: str
    past_few: str | None = None
    future_few: str | None = None
    past_two: str | None = None
    future_two: str | None = None
    past_many: str | None = None
    future_many: str | None = None

    def pattern(self, past: bool, category: PluralCategory) -> str:
        """Select the template for a direction and plural category."""
        if category == PluralCategory.ONE:
            return self.past_one if past else self.future_one

        if category == PluralCategory.TWO:
            form = self.past_two if past else self.future_two
        elif category == PluralCategory.FEW:
            form = self.past_few if past else self.future_few
        elif category == PluralCategory.MANY:
            form = self.past_many if past else self.future_many
        else:
            form = None

        if form is not None:
            return form
        return self.past_other if past else self.future_other


@dataclass(frozen=True)
class RelativeTimeData:
    """Locale-specific relative time patterns.

    ``idioms`` maps a unit name to the words used instead of a number when
    numeric output is not forced, e.g. ``{"week": {-1: "last week"}}``.
    """
    now: str = "now"
    second: RelativeTimeUnit = field(default_factory=lambda: RelativeTimeUnit(
        "{0} second ago", "{0} seconds ago", "in {0} second", "in {0} seconds"
    ))
    minute: RelativeTimeUnit = field(default_factory=lambda: RelativeTimeUnit(
        "{0} minute ago", "{0} minutes ago", "in {0} minute", "in {0} minutes"
    ))
    hour: RelativeTimeUnit = field(default_factory=lambda: RelativeTimeUnit(
        "{0} hour ago", "{0} hours ago", "in {0} hour", "in {0} hours"
    ))
    day: RelativeTimeUnit = field(default_factory=lambda: RelativeTimeUnit(
        "{0} day ago", "{0} days ago", "in {0} day", "in {0} days"
    ))
    week: RelativeTimeUnit = field(default_factory=lambda: RelativeTimeUnit(
        "{0} week ago", "{0} weeks ago", "in {0} week", "in {0} weeks"
    ))
    month: RelativeTimeUnit = field(default_factory=lambda: RelativeTimeUnit(
        "{0} month ago", "{0} months ago", "in {0} month", "in {0} months"
    ))
    year: RelativeTimeUnit = field(default_factory=lambda: RelativeTimeUnit(
        "{0} year ago", "{0} years ago", "in {0} year", "in {0} years"
    ))
    yesterday: str = "yesterday"
    today: str = "today"
    tomorrow: str = "tomorrow"
    idioms: dict[str, dict[int, str]] = field(default_factory=lambda: {
        "week": {-1: "last week", 0: "this week", 1: "next week"},
        "month": {-1: "last month", 0: "this month", 1: "next month"},
        "year": {-1: "last year", 0: "this year", 1: "next year"},
        "hour": {0: "this hour"},
        "minute": {0: "this minute"},
    })

    def unit(self, name: str) -> RelativeTimeUnit:
        """Get the patterns for a unit name ("second" ... "year")."""
        return getattr(self, name)

    def idiom(self, name: str, value: int) -> str | None:
        """Get the idiomatic word for a unit and signed value, if any."""
        if name == "day":
            return {-1: self.yesterday, 0: self.today, 1: self.tomorrow}.get(value)
        if name == "second" and value == 0:
            return self.now
        return self.idioms.get(name, {}).get(value)


_RELATIVE_TIME: dict[str, RelativeTimeData] = {
    "en": RelativeTimeData(),

    "ko": RelativeTimeData(
        now="지금",
        second=RelativeTimeUnit("{0}초 전", "{0}초 전", "{0}초 후", "{0}초 후"),
        minute=RelativeTimeUnit("{0}분 전", "{0}분 전", "{0}분 후", "{0}분 후"),
        hour=RelativeTimeUnit("{0}시간 전", "{0}시간 전", "{0}시간 후", "{0}시간 후"),
        day=RelativeTimeUnit("{0}일 전", "{0}일 전", "{0}일 후", "{0}일 후"),
        week=RelativeTimeUnit("{0}주 전", "{0}주 전", "{0}주 후", "{0}주 후"),
        month=RelativeTimeUnit("{0}개월 전", "{0}개월 전", "{0}개월 후", "{0}개월 후"),
        year=RelativeTimeUnit("{0}년 전", "{0}년 전", "{0}년 후", "{0}년 후"),
        yesterday="어제",
        today="오늘",
        tomorrow="내일",
        idioms={
            "week": {-1: "지난주", 0: "이번 주", 1: "다음 주"},
            "month": {-1: "지난달", 0: "이번 달", 1: "다음 달"},
            "year": {-1: "작년", 0: "올해", 1: "내년"},
        },
    ),

    "ja": RelativeTimeData(
        now="今",
        second=RelativeTimeUnit("{0}秒前", "{0}秒前", "{0}秒後", "{0}秒後"),
        minute=RelativeTimeUnit("{0}分前", "{0}分前", "{0}分後", "{0}分後"),
        hour=RelativeTimeUnit("{0}時間前", "{0}時間前", "{0}時間後", "{0}時間後"),
        day=RelativeTimeUnit("{0}日前", "{0}日前", "{0}日後", "{0}日後"),
        week=RelativeTimeUnit("{0}週間前", "{0}週間前", "{0}週間後", "{0}週間後"),
        month=RelativeTimeUnit("{0}か月前", "{0}か月前", "{0}か月後", "{0}か月後"),
        year=RelativeTimeUnit("{0}年前", "{0}年前", "{0}年後", "{0}年後"),
        yesterday="昨日",
        today="今日",
        tomorrow="明日",
        idioms={
            "week": {-1: "先週", 0: "今週", 1: "来週"},
            "month": {-1: "先月", 0: "今月", 1: "来月"},
            "year": {-1: "昨年", 0: "今年", 1: "来年"},
        },
    ),

    "zh": RelativeTimeData(
        now="现在",
        second=RelativeTimeUnit("{0}秒钟前", "{0}秒钟前", "{0}秒钟后", "{0}秒钟后"),
        minute=RelativeTimeUnit("{0}分钟前", "{0}分钟前", "{0}分钟后", "{0}分钟后"),
        hour=RelativeTimeUnit("{0}小时前", "{0}小时前", "{0}小时后", "{0}小时后"),
        day=RelativeTimeUnit("{0}天前", "{0}天前", "{0}天后", "{0}天后"),
        week=RelativeTimeUnit("{0}周前", "{0}周前", "{0}周后", "{0}周后"),
        month=RelativeTimeUnit("{0}个月前", "{0}个月前", "{0}个月后", "{0}个月后"),
        year=RelativeTimeUnit("{0}年前", "{0}年前", "{0}年后", "{0}年后"),
        yesterday="昨天",
        today="今天",
        tomorrow="明天",
        idioms={
            "week": {-1: "上周", 0: "本周", 1: "下周"},
            "month": {-1: "上个月", 0: "本月", 1: "下个月"},
            "year": {-1: "去年", 0: "今年", 1: "明年"},
        },
    ),

    "de": RelativeTimeData(
        now="jetzt",
        second=RelativeTimeUnit("vor {0} Sekunde", "vor {0} Sekunden", "in {0} Sekunde", "in {0} Sekunden"),
        minute=RelativeTimeUnit("vor {0} Minute", "vor {0} Minuten", "in {0} Minute", "in {0} Minuten"),
        hour=RelativeTimeUnit("vor {0} Stunde", "vor {0} Stunden", "in {0} Stunde", "in {0} Stunden"),
        day=RelativeTimeUnit("vor {0} Tag", "vor {0} Tagen", "in {0} Tag", "in {0} Tagen"),
        week=RelativeTimeUnit("vor {0} Woche", "vor {0} Wochen", "in {0} Woche", "in {0} Wochen"),
        month=RelativeTimeUnit("vor {0} Monat", "vor {0} Monaten", "in {0} Monat", "in {0} Monaten"),
        year=RelativeTimeUnit("vor {0} Jahr", "vor {0} Jahren", "in {0} Jahr", "in {0} Jahren"),
        yesterday="gestern",
        today="heute",
        tomorrow="morgen",
        idioms={
            "week": {-1: "letzte Woche", 0: "diese Woche", 1: "nächste Woche"},
            "month": {-1: "letzten Monat", 0: "diesen Monat", 1: "nächsten Monat"},
            "year": {-1: "letztes Jahr", 0: "dieses Jahr", 1: "nächstes Jahr"},
            "hour": {0: "in dieser Stunde"},
            "minute": {0: "in dieser Minute"},
        },
    ),

    "fr": RelativeTimeData(
        now="maintenant",
        second=RelativeTimeUnit("il y a {0} seconde", "il y a {0} secondes", "dans {0} seconde", "dans {0} secondes"),
        minute=RelativeTimeUnit("il y a {0} minute", "il y a {0} minutes", "dans {0} minute", "dans {0} minutes"),
        hour=RelativeTimeUnit("il y a {0} heure", "il y a {0} heures", "dans {0} heure", "dans {0} heures"),
        day=RelativeTimeUnit("il y a {0} jour", "il y a {0} jours", "dans {0} jour", "dans {0} jours"),
        week=RelativeTimeUnit("il y a {0} semaine", "il y a {0} semaines", "dans {0} semaine", "dans {0} semaines"),
        month=RelativeTimeUnit("il y a {0} mois", "il y a {0} mois", "dans {0} mois", "dans {0} mois"),
        year=RelativeTimeUnit("il y a {0} an", "il y a {0} ans", "dans {0} an", "dans {0} ans"),
        yesterday="hier",
        today="aujourd’hui",
        tomorrow="demain",
        idioms={
            "week": {-1: "la semaine dernière", 0: "cette semaine", 1: "la semaine prochaine"},
            "month": {-1: "le mois dernier", 0: "ce mois-ci", 1: "le mois prochain"},
            "year": {-1: "l’année dernière", 0: "cette année", 1: "l’année prochaine"},
            "hour": {0: "cette heure-ci"},
            "minute": {0: "cette minute-ci"},
        },
    ),

    "es": RelativeTimeData(
        now="ahora",
        second=RelativeTimeUnit("hace {0} segundo", "hace {0} segundos", "dentro de {0} segundo", "dentro de {0} segundos"),
        minute=RelativeTimeUnit("hace {0} minuto", "hace {0} minutos", "dentro de {0} minuto", "dentro de {0} minutos"),
        hour=RelativeTimeUnit("hace {0} hora", "hace {0} horas", "dentro de {0} hora", "dentro de {0} horas"),
        day=RelativeTimeUnit("hace {0} día", "hace {0} días", "dentro de {0} día", "dentro de {0} días"),
        week=RelativeTimeUnit("hace {0} semana", "hace {0} semanas", "dentro de {0} semana", "dentro de {0} semanas"),
        month=RelativeTimeUnit("hace {0} mes", "hace {0} meses", "dentro de {0} mes", "dentro de {0} meses"),
        year=RelativeTimeUnit("hace {0} año", "hace {0} años", "dentro de {0} año", "dentro de {0} años"),
        yesterday="ayer",
        today="hoy",
        tomorrow="mañana",
        idioms={
            "week": {-1: "la semana pasada", 0: "esta semana", 1: "la próxima semana"},
            "month": {-1: "el mes pasado", 0: "este mes", 1: "el próximo mes"},
            "year": {-1: "el año pasado", 0: "este año", 1: "el próximo año"},
            "hour": {0: "esta hora"},
            "minute": {0: "este minuto"},
        },
    ),

    "it": RelativeTimeData(
        now="ora",
        second=RelativeTimeUnit("{0} secondo fa", "{0} secondi fa", "tra {0} secondo", "tra {0} secondi"),
        minute=RelativeTimeUnit("{0} minuto fa", "{0} minuti fa", "tra {0} minuto", "tra {0} minuti"),
        hour=RelativeTimeUnit("{0} ora fa", "{0} ore fa", "tra {0} ora", "tra {0} ore"),
        day=RelativeTimeUnit("{0} giorno fa", "{0} giorni fa", "tra {0} giorno", "tra {0} giorni"),
        week=RelativeTimeUnit("{0} settimana fa", "{0} settimane fa", "tra {0} settimana", "tra {0} settimane"),
        month=RelativeTimeUnit("{0} mese fa", "{0} mesi fa", "tra {0} mese", "tra {0} mesi"),
        year=RelativeTimeUnit("{0} anno fa", "{0} anni fa", "tra {0} anno", "tra {0} anni"),
        yesterday="ieri",
        today="oggi",
        tomorrow="domani",
        idioms={
            "week": {-1: "settimana scorsa", 0: "questa settimana", 1: "settimana prossima"},
            "month": {-1: "mese scorso", 0: "questo mese", 1: "mese prossimo"},
            "year": {-1: "anno scorso", 0: "quest’anno", 1: "anno prossimo"},
        },
    ),

    "pt": RelativeTimeData(
        now="agora",
        second=RelativeTimeUnit("há {0} segundo", "há {0} segundos", "em {0} segundo", "em {0} segundos"),
        minute=RelativeTimeUnit("há {0} minuto", "há {0} minutos", "em {0} minuto", "em {0} minutos"),
        hour=RelativeTimeUnit("há {0} hora", "há {0} horas", "em {0} hora", "em {0} horas"),
        day=RelativeTimeUnit("há {0} dia", "há {0} dias", "em {0} dia", "em {0} dias"),
        week=RelativeTimeUnit("há {0} semana", "há {0} semanas", "em {0} semana", "em {0} semanas"),
        month=RelativeTimeUnit("há {0} mês", "há {0} meses", "em {0} mês", "em {0} meses"),
        year=RelativeTimeUnit("há {0} ano", "há {0} anos", "em {0} ano", "em {0} anos"),
        yesterday="ontem",
        today="hoje",
        tomorrow="amanhã",
        idioms={
            "week": {-1: "semana passada", 0: "esta semana", 1: "próxima semana"},
            "month": {-1: "mês passado", 0: "este mês", 1: "próximo mês"},
            "year": {-1: "ano passado", 0: "este ano", 1: "próximo ano"},
        },
    ),

    "ru": RelativeTimeData(
        now="сейчас",
        second=RelativeTimeUnit(
            "{0} секунду назад", "{0} секунд назад", "через {0} секунду", "через {0} секунд",
            past_few="{0} секунды назад", future_few="через {0} секунды",
        ),
        minute=RelativeTimeUnit(
            "{0} минуту назад", "{0} минут назад", "через {0} минуту", "через {0} минут",
            past_few="{0} минуты назад", future_few="через {0} минуты",
        ),
        hour=RelativeTimeUnit(
            "{0} час назад", "{0} часов назад", "через {0} час", "через {0} часов",
            past_few="{0} часа назад", future_few="через {0} часа",
        ),
        day=RelativeTimeUnit(
            "{0} день назад", "{0} дней назад", "через {0} день", "через {0} дней",
            past_few="{0} дня назад", future_few="через {0} дня",
        ),
        week=RelativeTimeUnit(
            "{0} неделю назад", "{0} недель назад", "через {0} неделю", "через {0} недель",
            past_few="{0} недели назад", future_few="через {0} недели",
        ),
        month=RelativeTimeUnit(
            "{0} месяц назад", "{0} месяцев назад", "через {0} месяц", "через {0} месяцев",
            past_few="{0} месяца назад", future_few="через {0} месяца",
        ),
        year=RelativeTimeUnit(
            "{0} год назад", "{0} лет назад", "через {0} год", "через {0} лет",
            past_few="{0} года назад", future_few="через {0} года",
        ),
        yesterday="вчера",
        today="сегодня",
        tomorrow="завтра",
        idioms={
            "week": {-1: "на прошлой неделе", 0: "на этой неделе", 1: "на следующей неделе"},
            "month": {-1: "в прошлом месяце", 0: "в этом месяце", 1: "в следующем месяце"},
            "year": {-1: "в прошлом году", 0: "в этом году", 1: "в следующем году"},
        },
    ),

    "ar": RelativeTimeData(
        now="الآن",
        second=RelativeTimeUnit(
            "قبل ثانية واحدة", "قبل {0} ثانية", "خلال ثانية واحدة", "خلال {0} ثانية",
            past_two="قبل ثانيتين", future_two="خلال ثانيتين",
            past_few="قبل {0} ثوانٍ", future_few="خلال {0} ثوانٍ",
        ),
        minute=RelativeTimeUnit(
            "قبل دقيقة واحدة", "قبل {0} دقيقة", "خلال دقيقة واحدة", "خلال {0} دقيقة",
            past_two="قبل دقيقتين", future_two="خلال دقيقتين",
            past_few="قبل {0} دقائق", future_few="خلال {0} دقائق",
        ),
        hour=RelativeTimeUnit(
            "قبل ساعة واحدة", "قبل {0} ساعة", "خلال ساعة واحدة", "خلال {0} ساعة",
            past_two="قبل ساعتين", future_two="خلال ساعتين",
            past_few="قبل {0} ساعات", future_few="خلال {0} ساعات",
        ),
        day=RelativeTimeUnit(
            "قبل يوم واحد", "قبل {0} يوم", "خلال يوم واحد", "خلال {0} يوم",
            past_two="قبل يومين", future_two="خلال يومين",
            past_few="قبل {0} أيام", future_few="خلال {0} أيام",
            past_many="قبل {0} يومًا", future_many="خلال {0} يومًا",
        ),
        week=RelativeTimeUnit(
            "قبل أسبوع واحد", "قبل {0} أسبوع", "خلال أسبوع واحد", "خلال {0} أسبوع",
            past_two="قبل أسبوعين", future_two="خلال أسبوعين",
            past_few="قبل {0} أسابيع", future_few="خلال {0} أسابيع",
            past_many="قبل {0} أسبوعًا", future_many="خلال {0} أسبوعًا",
        ),
        month=RelativeTimeUnit(
            "قبل شهر واحد", "قبل {0} شهر", "خلال شهر واحد", "خلال {0} شهر",
            past_two="قبل شهرين", future_two="خلال شهرين",
            past_few="قبل {0} أشهر", future_few="خلال {0} أشهر",
            past_many="قبل {0} شهرًا", future_many="خلال {0} شهرًا",
        ),
        year=RelativeTimeUnit(
            "قبل سنة واحدة", "قبل {0} سنة", "خلال سنة واحدة", "خلال {0} سنة",
            past_two="قبل سنتين", future_two="خلال سنتين",
            past_few="قبل {0} سنوات", future_few="خلال {0} سنوات",
        ),
        yesterday="أمس",
        today="اليوم",
        tomorrow="غدًا",
        idioms={},
    ),
}

# Abbreviated English forms; other languages use their long forms.
_RELATIVE_TIME_SHORT: dict[str, RelativeTimeData] = {
    "en": RelativeTimeData(
        second=RelativeTimeUnit("{0} sec. ago", "{0} sec. ago", "in {0} sec.", "in {0} sec."),
        minute=RelativeTimeUnit("{0} min. ago", "{0} min. ago", "in {0} min.", "in {0} min."),
        hour=RelativeTimeUnit("{0} hr. ago", "{0} hr. ago", "in {0} hr.", "in {0} hr."),
        week=RelativeTimeUnit("{0} wk. ago", "{0} wk. ago", "in {0} wk.", "in {0} wk."),
        month=RelativeTimeUnit("{0} mo. ago", "{0} mo. ago", "in {0} mo.", "in {0} mo."),
        year=RelativeTimeUnit("{0} yr. ago", "{0} yr. ago", "in {0} yr.", "in {0} yr."),
        idioms={
            "week": {-1: "last wk.", 0: "this wk.", 1: "next wk."},
            "month": {-1: "last mo.", 0: "this mo.", 1: "next mo."},
            "year": {-1: "last yr.", 0: "this yr.", 1: "next yr."},
            "hour": {0: "this hour"},
            "minute": {0: "this minute"},
        },
    ),
}

_RELATIVE_TIME_NARROW: dict[str, RelativeTimeData] = {
    "en": RelativeTimeData(
        second=RelativeTimeUnit("{0}s ago", "{0}s ago", "in {0}s", "in {0}s"),
        minute=RelativeTimeUnit("{0}m ago", "{0}m ago", "in {0}m", "in {0}m"),
        hour=RelativeTimeUnit("{0}h ago", "{0}h ago", "in {0}h", "in {0}h"),
        day=RelativeTimeUnit("{0}d ago", "{0}d ago", "in {0}d", "in {0}d"),
        week=RelativeTimeUnit("{0}w ago", "{0}w ago", "in {0}w", "in {0}w"),
        month=RelativeTimeUnit("{0}mo ago", "{0}mo ago", "in {0}mo", "in {0}mo"),
        year=RelativeTimeUnit("{0}y ago", "{0}y ago", "in {0}y", "in {0}y"),
        idioms={
            "week": {-1: "last wk.", 0: "this wk.", 1: "next wk."},
            "month": {-1: "last mo.", 0: "this mo.", 1: "next mo."},
            "year": {-1: "last yr.", 0: "this yr.", 1: "next yr."},
            "hour": {0: "this hour"},
            "minute": {0: "this minute"},
        },
    ),
}

_RELATIVE_TIME_BY_STYLE: dict[str, dict[str, RelativeTimeData]] = {
    "short": _RELATIVE_TIME_SHORT,
    "narrow": _RELATIVE_TIME_NARROW,
}


def get_relative_time_data(locale: LocaleInfo, style: str = "long") -> RelativeTimeData:
    """Get relative time patterns for a locale and style.

    Args:
        locale: Target locale
        style: "long", "short" or "narrow"

    Returns:
        RelativeTimeData for the locale
    """
    styled = _RELATIVE_TIME_BY_STYLE.get(style, {})
    for key in locale.lookup_keys():
        if key in styled:
            return styled[key]
        if key in _RELATIVE_TIME:
            return _RELATIVE_TIME[key]

    return styled.get("en", _RELATIVE_TIME["en"])


# ==============================================================================
# Date/Time Patterns
# ==============================================================================

@dataclass(frozen=True)
class DateTimePatterns:
    """Locale-specific calendar patterns.

    ``date_text`` is used when the month is spelled out, ``date_numeric``
    when it is a number. ``weekday_join`` and ``datetime_join`` place the
    weekday and the time relative to the date.
    ``numeric_month`` keeps the month a number in ``date_text``, for
    languages whose pattern already carries the month marker ("y年M月d日").
    """
    date_text: str = "MMM d, y"
    date_numeric: str = "M/d/y"
    time_24: str = "HH:mm"
    time_12: str = "h:mm a"
    hour12: bool = True
    weekday_join: str = "{weekday}, {date}"
    datetime_join: str = "{date}, {time}"
    numeric_month: bool = False

    months_wide: tuple[str, ...] = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )
    months_abbreviated: tuple[str, ...] = (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    )
    days_wide: tuple[str, ...] = (
        "Sunday", "Monday", "Tuesday", "Wednesday",
        "Thursday", "Friday", "Saturday",
    )
    days_abbreviated: tuple[str, ...] = (
        "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat",
    )

    am: str = "AM"
    pm: str = "PM"

    def month_narrow(self, index: int) -> str:
        return self.months_wide[index][:1].upper()


_DATE_PATTERNS: dict[str, DateTimePatterns] = {
    "en": DateTimePatterns(),

    "en_GB": DateTimePatterns(
        date_text="d MMM y",
        date_numeric="dd/MM/y",
        hour12=False,
        weekday_join="{weekday} {date}",
    ),

    "de": DateTimePatterns(
        date_text="d. MMM y",
        date_numeric="d.M.y",
        hour12=False,
        datetime_join="{date}, {time}",
        months_wide=(
            "Januar", "Februar", "März", "April", "Mai", "Juni",
            "Juli", "August", "September", "Oktober", "November", "Dezember",
        ),
        months_abbreviated=("Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
                            "Juli", "Aug.", "Sept.", "Okt.", "Nov.", "Dez."),
        days_wide=("Sonntag", "Montag", "Dienstag", "Mittwoch",
                   "Donnerstag", "Freitag", "Samstag"),
        days_abbreviated=("So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."),
    ),

    "fr": DateTimePatterns(
        date_text="d MMM y",
        date_numeric="dd/MM/y",
        hour12=False,
        weekday_join="{weekday} {date}",
        datetime_join="{date} {time}",
        months_wide=(
            "janvier", "février", "mars", "avril", "mai", "juin",
            "juillet", "août", "septembre", "octobre", "novembre", "décembre",
        ),
        months_abbreviated=("janv.", "févr.", "mars", "avr.", "mai", "juin",
                            "juil.", "août", "sept.", "oct.", "nov.", "déc."),
        days_wide=("dimanche", "lundi", "mardi", "mercredi",
                   "jeudi", "vendredi", "samedi"),
        days_abbreviated=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
    ),

    "es": DateTimePatterns(
        date_text="d MMM y",
        date_numeric="d/M/y",
        time_24="H:mm",
        hour12=False,
        datetime_join="{date}, {time}",
        months_wide=(
            "enero", "febrero", "marzo", "abril", "mayo", "junio",
            "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
        ),
        months_abbreviated=("ene", "feb", "mar", "abr", "may", "jun",
                            "jul", "ago", "sept", "oct", "nov", "dic"),
        days_wide=("domingo", "lunes", "martes", "miércoles",
                   "jueves", "viernes", "sábado"),
        days_abbreviated=("dom", "lun", "mar", "mié", "jue", "vie", "sáb"),
    ),

    "it": DateTimePatterns(
        date_text="d MMM y",
        date_numeric="d/M/y",
        hour12=False,
        weekday_join="{weekday} {date}",
        datetime_join="{date}, {time}",
        months_wide=(
            "gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno",
            "luglio", "agosto", "settembre", "ottobre", "novembre", "dicembre",
        ),
        months_abbreviated=("gen", "feb", "mar", "apr", "mag", "giu",
                            "lug", "ago", "set", "ott", "nov", "dic"),
        days_wide=("domenica", "lunedì", "martedì", "mercoledì",
                   "giovedì", "venerdì", "sabato"),
        days_abbreviated=("dom", "lun", "mar", "mer", "gio", "ven", "sab"),
    ),

    "pt": DateTimePatterns(
        date_text="d 'de' MMM 'de' y",
        date_numeric="dd/MM/y",
        hour12=False,
        datetime_join="{date}, {time}",
        months_wide=(
            "janeiro", "fevereiro", "março", "abril", "maio", "junho",
            "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
        ),
        months_abbreviated=("jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
                            "jul.", "ago.", "set.", "out.", "nov.", "dez."),
        days_wide=("domingo", "segunda-feira", "terça-feira", "quarta-feira",
                   "quinta-feira", "sexta-feira", "sábado"),
        days_abbreviated=("dom.", "seg.", "ter.", "qua.", "qui.", "sex.", "sáb."),
    ),

    "ru": DateTimePatterns(
        date_text="d MMM y 'г.'",
        date_numeric="dd.MM.y",
        hour12=False,
        datetime_join="{date}, {time}",
        months_wide=(
            "января", "февраля", "марта", "апреля", "мая", "июня",
            "июля", "августа", "сентября", "октября", "ноября", "декабря",
        ),
        months_abbreviated=("янв.", "февр.", "мар.", "апр.", "мая", "июн.",
                            "июл.", "авг.", "сент.", "окт.", "нояб.", "дек."),
        days_wide=("воскресенье", "понедельник", "вторник", "среда",
                   "четверг", "пятница", "суббота"),
        days_abbreviated=("вс", "пн", "вт", "ср", "чт", "пт", "сб"),
    ),

    "ja": DateTimePatterns(
        date_text="y年M月d日",
        numeric_month=True,
        date_numeric="y/M/d",
        time_24="H:mm",
        hour12=False,
        weekday_join="{date}({weekday})",
        datetime_join="{date} {time}",
        months_wide=("1月", "2月", "3月", "4月", "5月", "6月",
                     "7月", "8月", "9月", "10月", "11月", "12月"),
        months_abbreviated=("1月", "2月", "3月", "4月", "5月", "6月",
                            "7月", "8月", "9月", "10月", "11月", "12月"),
        days_wide=("日曜日", "月曜日", "火曜日", "水曜日",
                   "木曜日", "金曜日", "土曜日"),
        days_abbreviated=("日", "月", "火", "水", "木", "金", "土"),
        am="午前",
        pm="午後",
    ),

    "ko": DateTimePatterns(
        date_text="y년 M월 d일",
        numeric_month=True,
        date_numeric="y. M. d.",
        time_12="a h:mm",
        weekday_join="{date} ({weekday})",
        datetime_join="{date} {time}",
        months_wide=("1월", "2월", "3월", "4월", "5월", "6월",
                     "7월", "8월", "9월", "10월", "11월", "12월"),
        months_abbreviated=("1월", "2월", "3월", "4월", "5월", "6월",
                            "7월", "8월", "9월", "10월", "11월", "12월"),
        days_wide=("일요일", "월요일", "화요일", "수요일",
                   "목요일", "금요일", "토요일"),
        days_abbreviated=("일", "월", "화", "수", "목", "금", "토"),
        am="오전",
        pm="오후",
    ),

    "zh": DateTimePatterns(
        date_text="y年M月d日",
        numeric_month=True,
        date_numeric="y/M/d",
        hour12=False,
        weekday_join="{date}{weekday}",
        datetime_join="{date} {time}",
        months_wide=("一月", "二月", "三月", "四月", "五月", "六月",
                     "七月", "八月", "九月", "十月", "十一月", "十二月"),
        months_abbreviated=("1月", "2月", "3月", "4月", "5月", "6月",
                            "7月", "8月", "9月", "10月", "11月", "12月"),
        days_wide=("星期日", "星期一", "星期二", "星期三",
                   "星期四", "星期五", "星期六"),
        days_abbreviated=("周日", "周一", "周二", "周三", "周四", "周五", "周六"),
        am="上午",
        pm="下午",
    ),

    "ar": DateTimePatterns(
        date_text="d MMM y",
        date_numeric="d/M/y",
        weekday_join="{weekday}، {date}",
        datetime_join="{date}، {time}",
        months_wide=(
            "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
            "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
        ),
        months_abbreviated=(
            "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
            "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
        ),
        days_wide=("الأحد", "الاثنين", "الثلاثاء", "الأربعاء",
                   "الخميس", "الجمعة", "السبت"),
        days_abbreviated=("الأحد", "الاثنين", "الثلاثاء", "الأربعاء",
                          "الخميس", "الجمعة", "السبت"),
        am="ص",
        pm="م",
    ),
}


def get_date_patterns(locale: LocaleInfo) -> DateTimePatterns:
    """Get calendar patterns for a locale, falling back to English."""
    for key in locale.lookup_keys():
        if key in _DATE_PATTERNS:
            return _DATE_PATTERNS[key]
    return _DATE_PATTERNS["en"]


def supported_languages() -> list[str]:
    """Language keys that have their own relative-time patterns."""
    return sorted(_RELATIVE_TIME)


__all__ = [
    "RelativeTimeUnit",
    "RelativeTimeData",
    "DateTimePatterns",
    "get_relative_time_data",
    "get_date_patterns",
    "supported_languages",
]
