"""Static directory of Russian city names used for typeahead suggestions.

Ordered roughly by population so that, within a match tier, bigger cities
are suggested first.
"""

from typing import Tuple

RUSSIAN_CITIES: Tuple[str, ...] = (
    "Москва",
    "Санкт-Петербург",
    "Новосибирск",
    "Екатеринбург",
    "Казань",
    "Нижний Новгород",
    "Красноярск",
    "Челябинск",
    "Самара",
    "Уфа",
    "Ростов-на-Дону",
    "Краснодар",
    "Омск",
    "Воронеж",
    "Пермь",
    "Волгоград",
    "Саратов",
    "Тюмень",
    "Тольятти",
    "Махачкала",
    "Ижевск",
    "Барнаул",
    "Ульяновск",
    "Иркутск",
    "Хабаровск",
    "Ярославль",
    "Владивосток",
    "Томск",
    "Оренбург",
    "Кемерово",
    "Новокузнецк",
    "Рязань",
    "Набережные Челны",
    "Астрахань",
    "Пенза",
    "Киров",
    "Липецк",
    "Балашиха",
    "Чебоксары",
    "Калининград",
    "Тула",
    "Ставрополь",
    "Курск",
    "Улан-Удэ",
    "Сочи",
    "Тверь",
    "Магнитогорск",
    "Иваново",
    "Брянск",
    "Белгород",
    "Сургут",
    "Владимир",
    "Чита",
    "Архангельск",
    "Нижний Тагил",
    "Симферополь",
    "Калуга",
    "Якутск",
    "Грозный",
    "Волжский",
    "Смоленск",
    "Саранск",
    "Череповец",
    "Курган",
    "Подольск",
    "Вологда",
    "Орёл",
    "Владикавказ",
    "Тамбов",
    "Мурманск",
    "Петрозаводск",
    "Нижневартовск",
    "Кострома",
    "Новороссийск",
    "Йошкар-Ола",
    "Химки",
    "Таганрог",
    "Комсомольск-на-Амуре",
    "Сыктывкар",
    "Нальчик",
    "Шахты",
    "Дзержинск",
    "Нижнекамск",
    "Орск",
    "Братск",
    "Благовещенск",
    "Энгельс",
    "Ангарск",
    "Королёв",
    "Великий Новгород",
    "Старый Оскол",
    "Мытищи",
    "Псков",
    "Люберцы",
    "Южно-Сахалинск",
    "Бийск",
    "Прокопьевск",
    "Армавир",
    "Балаково",
    "Абакан",
    "Рыбинск",
    "Северодвинск",
    "Норильск",
    "Петропавловск-Камчатский",
    "Уссурийск",
    "Волгодонск",
    "Сызрань",
    "Новочеркасск",
    "Каменск-Уральский",
    "Златоуст",
    "Электросталь",
    "Альметьевск",
    "Салават",
    "Миасс",
    "Керчь",
    "Копейск",
    "Находка",
    "Пятигорск",
    "Хасавюрт",
    "Рубцовск",
    "Березники",
    "Коломна",
    "Майкоп",
    "Одинцово",
    "Ковров",
    "Кисловодск",
    "Нефтекамск",
    "Серпухов",
    "Новочебоксарск",
    "Нефтеюганск",
    "Первоуральск",
    "Черкесск",
    "Дербент",
    "Орехово-Зуево",
    "Новый Уренгой",
    "Евпатория",
    "Северск",
    "Арзамас",
    "Обнинск",
    "Каспийск",
    "Ноябрьск",
    "Назрань",
    "Элиста",
    "Жуковский",
    "Кызыл",
    "Новомосковск",
    "Сергиев Посад",
    "Ессентуки",
    "Ачинск",
    "Муром",
    "Магадан",
    "Анадырь",
    "Мосальск",
    "Салехард",
    "Ханты-Мансийск",
)
